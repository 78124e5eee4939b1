"""Photo analysis backed by the OpenAI Responses API."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from lensbase.services.analysis import AnalysisClient, AnalysisRequest

RESPONSE_FORMAT_NAME = "photo_analysis"


@dataclass
class OpenAIAnalysisClient(AnalysisClient):
    """Sends one photo per request and returns the model's JSON answer.

    ``image_detail`` is passed through to the image input; tagging and
    captioning rarely need more than ``"auto"``.
    """

    client: AsyncOpenAI
    image_detail: str = "auto"

    @classmethod
    def create(cls, api_key: str) -> "OpenAIAnalysisClient":
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def analyze(self, request: AnalysisRequest) -> dict[str, object]:
        """Describe the photo in ``request`` as a JSON object."""
        response = await self.client.responses.create(
            **_request_payload(request, self.image_detail)
        )
        if not response.output_text:
            raise RuntimeError("OpenAI returned no photo analysis")
        return json.loads(response.output_text)

    async def close(self) -> None:
        await self.client.close()


def _request_payload(request: AnalysisRequest, image_detail: str) -> dict[str, object]:
    photo = {
        "type": "input_image",
        "image_url": request.image_data_url,
        "detail": image_detail,
    }
    payload: dict[str, object] = {
        "model": request.model,
        "input": [
            {
                "role": "user",
                "content": [photo, {"type": "input_text", "text": request.prompt}],
            }
        ],
        "text": {
            "format": {
                "type": "json_schema",
                "name": RESPONSE_FORMAT_NAME,
                "strict": True,
                "schema": request.schema,
            }
        },
        "store": request.store,
    }
    if request.reasoning_effort:
        payload["reasoning"] = {"effort": request.reasoning_effort}
    return payload
