"""Demonstration dataset and the signed-in user profile."""

from lensbase.domain.photos import PhotoLocation, PhotoMetadata, PhotoRecord
from lensbase.domain.users import User, UserRole


def seed_photos() -> list[PhotoRecord]:
    """Return a fresh copy of the demonstration photos."""
    return [
        PhotoRecord(
            id="1",
            url="https://picsum.photos/id/10/800/600",
            filename="mountain_trek.jpg",
            upload_date="2024-05-10",
            capture_date="2024-05-01 14:30",
            location=PhotoLocation(lat=46.8523, lng=9.53, name="Swiss Alps"),
            notes="Breathtaking view of the summit during the spring trek.",
            tags=["Nature", "Mountains", "Landscape"],
            category="Travel",
            metadata=PhotoMetadata(
                iso=100,
                aperture="f/8",
                shutter_speed="1/250s",
                focal_length="24mm",
                camera="Sony A7IV",
            ),
        ),
        PhotoRecord(
            id="2",
            url="https://picsum.photos/id/11/800/600",
            filename="forest_mist.jpg",
            upload_date="2024-05-12",
            capture_date="2024-05-02 06:15",
            location=PhotoLocation(
                lat=47.9423, lng=8.3, name="Black Forest, Germany"
            ),
            notes="Early morning fog in the deep woods.",
            tags=["Forest", "Fog", "Mystical"],
            category="Nature",
            metadata=PhotoMetadata(
                iso=400,
                aperture="f/2.8",
                shutter_speed="1/60s",
                focal_length="35mm",
                camera="Canon R6",
            ),
        ),
        PhotoRecord(
            id="3",
            url="https://picsum.photos/id/12/800/600",
            filename="city_night.jpg",
            upload_date="2024-05-15",
            capture_date="2024-05-10 21:45",
            location=PhotoLocation(lat=40.7128, lng=-74.006, name="New York City"),
            notes="Long exposure of Times Square.",
            tags=["City", "Night", "Long Exposure"],
            category="Architecture",
            metadata=PhotoMetadata(
                iso=800,
                aperture="f/11",
                shutter_speed="10s",
                focal_length="16mm",
                camera="Nikon Z7",
            ),
        ),
        PhotoRecord(
            id="4",
            url="https://picsum.photos/id/13/800/600",
            filename="beach_sunset.jpg",
            upload_date="2024-05-18",
            capture_date="2024-05-15 19:30",
            location=PhotoLocation(
                lat=34.0195, lng=-118.4912, name="Santa Monica Beach"
            ),
            notes="Classic sunset at the pier.",
            tags=["Beach", "Sunset", "California"],
            category="Nature",
            metadata=PhotoMetadata(
                iso=100,
                aperture="f/5.6",
                shutter_speed="1/500s",
                focal_length="50mm",
                camera="Fuji X-T4",
            ),
        ),
    ]


CURRENT_USER = User(
    id="u1",
    name="Alex Rivera",
    email="alex@lensbase.com",
    role=UserRole.ADMIN,
    avatar="https://api.dicebear.com/7.x/avataaars/svg?seed=Alex",
)
