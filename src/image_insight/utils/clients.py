from __future__ import annotations

from dataclasses import dataclass

from azure.ai.vision.imageanalysis import ImageAnalysisClient
from azure.core.credentials import AzureKeyCredential

from image_insight.config import ServiceSettings

__all__ = ["VisionClient"]


@dataclass
class VisionClient:
    """Azure AI Vision image analysis client bound to one endpoint/key pair.

    Wraps the ``azure-ai-vision-imageanalysis`` SDK client; requests are
    synchronous and use the SDK's default transport settings.
    """

    endpoint: str
    key: str

    def __post_init__(self) -> None:
        self.client = ImageAnalysisClient(
            endpoint=self.endpoint,
            credential=AzureKeyCredential(self.key),
        )

    @classmethod
    def from_settings(cls, settings: ServiceSettings) -> "VisionClient":
        return cls(endpoint=settings.endpoint, key=settings.key)

    def __repr__(self) -> str:
        return f"VisionClient(endpoint={self.endpoint!r})"
