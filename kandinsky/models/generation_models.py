"""Pydantic models for Kandinsky generation requests, polling and output"""
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_API_URL = "https://api-key.fusionbrain.ai/"


class Credentials(BaseModel):
    """API credentials and base endpoint, fixed for the client's lifetime"""
    model_config = ConfigDict(frozen=True)

    api_key: str
    secret_key: str
    url: str = DEFAULT_API_URL

    @field_validator("url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"

    @property
    def auth_headers(self) -> Dict[str, str]:
        return {
            "X-Key": f"Key {self.api_key}",
            "X-Secret": f"Secret {self.secret_key}",
        }


class GenerationOptions(BaseModel):
    """Options for a single generation job"""
    model_config = ConfigDict(frozen=True)

    width: int = Field(default=1024, gt=0)
    height: int = Field(default=576, gt=0)
    num_images: int = Field(default=1, ge=1)
    style: Optional[str] = None
    negative_prompt: Optional[str] = None

    def to_params(self, prompt: str) -> dict:
        """Build the job specification sent as the `params` part.

        Optional fields are left out entirely when not set, the service
        does not accept nulls for them.
        """
        params = {
            "type": "GENERATE",
            "numImages": self.num_images,
            "width": self.width,
            "height": self.height,
            "generateParams": {
                "query": prompt
            }
        }

        if self.style:
            params["style"] = self.style

        if self.negative_prompt:
            params["negativePromptDecoder"] = self.negative_prompt

        return params


class PollOptions(BaseModel):
    """Polling budget; delay is in milliseconds"""
    model_config = ConfigDict(frozen=True)

    attempts: int = Field(default=20, ge=1)
    delay: int = Field(default=5000, ge=0)

    @property
    def delay_seconds(self) -> float:
        return self.delay / 1000


class ProgressEvent(BaseModel):
    """One status observation made while polling a job.

    Only the final DONE observation carries `files`.
    """
    model_config = ConfigDict(frozen=True)

    status: Optional[str] = None
    attempts_left: int
    total_attempts: int
    files: Optional[List[str]] = None

    @property
    def done(self) -> bool:
        return self.files is not None
