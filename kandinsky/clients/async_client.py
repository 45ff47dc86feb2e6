"""Async client for the Fusion Brain (Kandinsky) API"""
import asyncio
import json
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Sequence

import httpx

from kandinsky.exceptions.kandinsky_exceptions import (
    GenerationFailedError,
    GenerationTimeoutError,
    ResolutionError,
    StatusCheckError,
    SubmissionError,
)
from kandinsky.models.generation_models import (
    DEFAULT_API_URL,
    Credentials,
    GenerationOptions,
    PollOptions,
    ProgressEvent,
)
from media.image_saver import ImageSink, SaveOptions, save_images
from utils.logging_config import get_logger

logger = get_logger(__name__)

PIPELINES_PATH = "key/api/v1/pipelines"
RUN_PATH = "key/api/v1/pipeline/run"
STATUS_PATH = "key/api/v1/pipeline/status/{request_id}"

STATUS_DONE = "DONE"
STATUS_FAIL = "FAIL"
IN_PROGRESS_STATUSES = ("INITIAL", "PROCESSING")

# Anything that goes wrong while decoding a response body
PARSE_ERRORS = (ValueError, KeyError, TypeError, IndexError)


class KandinskyClient:
    def __init__(self, api_key: str, secret_key: str, url: str = DEFAULT_API_URL,
                 timeout: float = 30.0,
                 http_client: Optional[httpx.AsyncClient] = None,
                 sleep: Optional[Callable[[float], Awaitable[None]]] = None):
        self.credentials = Credentials(api_key=api_key, secret_key=secret_key, url=url)

        # HTTP client; only closed by us if we created it
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._sleep = sleep or asyncio.sleep

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    @property
    def url(self) -> str:
        return self.credentials.url

    def _endpoint(self, path: str) -> str:
        return f"{self.credentials.url}{path}"

    async def get_pipeline(self) -> str:
        """
        Get the pipeline ID of the first pipeline the service offers
        """
        try:
            response = await self._client.get(
                self._endpoint(PIPELINES_PATH),
                headers=self.credentials.auth_headers
            )
            response.raise_for_status()

            data = response.json()
            if not data:
                raise ResolutionError("Failed to get pipeline ID: No pipelines available")

            pipeline_id = data[0]["id"]
            logger.debug(f"Resolved pipeline {pipeline_id}")
            return pipeline_id

        except ResolutionError as e:
            logger.error(str(e))
            raise
        except httpx.HTTPStatusError as e:
            logger.error(f"Pipeline listing returned HTTP {e.response.status_code}")
            raise ResolutionError(
                f"Failed to get pipeline ID: {e}", status_code=e.response.status_code
            ) from e
        except (httpx.HTTPError, *PARSE_ERRORS) as e:
            logger.error(f"Failed to get pipeline ID: {e}")
            raise ResolutionError(f"Failed to get pipeline ID: {e}") from e

    async def generate(self, prompt: str, pipeline_id: str,
                       options: Optional[GenerationOptions] = None) -> str:
        """
        Submit a generation job and return its request UUID
        """
        if not prompt or not prompt.strip():
            raise ValueError("Prompt must not be empty")

        options = options or GenerationOptions()
        params = options.to_params(prompt)

        # pipeline_id goes as a plain form field, params as a JSON file part
        data = {"pipeline_id": pipeline_id}
        files = {"params": (None, json.dumps(params), "application/json")}

        try:
            response = await self._client.post(
                self._endpoint(RUN_PATH),
                headers=self.credentials.auth_headers,
                data=data,
                files=files
            )
            response.raise_for_status()

            result = response.json()
            if not isinstance(result, dict):
                raise TypeError(f"Unexpected submission payload: {result!r}")

            # The service answers 200 with pipeline_status when it is unavailable
            if result.get("pipeline_status"):
                raise SubmissionError(
                    f"Failed to generate image: Service unavailable: {result['pipeline_status']}"
                )

            request_id = result["uuid"]
            logger.info(f"Submitted generation job {request_id} ({options.width}x{options.height})")
            return request_id

        except SubmissionError as e:
            logger.error(str(e))
            raise
        except httpx.HTTPStatusError as e:
            logger.error(f"Job submission returned HTTP {e.response.status_code}")
            raise SubmissionError(
                f"Failed to generate image: {e}", status_code=e.response.status_code
            ) from e
        except (httpx.HTTPError, *PARSE_ERRORS) as e:
            logger.error(f"Failed to generate image: {e}")
            raise SubmissionError(f"Failed to generate image: {e}") from e

    async def _fetch_status(self, request_id: str) -> dict:
        try:
            response = await self._client.get(
                self._endpoint(STATUS_PATH.format(request_id=request_id)),
                headers=self.credentials.auth_headers
            )
            response.raise_for_status()

            data = response.json()
            if not isinstance(data, dict):
                raise TypeError(f"Unexpected status payload: {data!r}")

            status = data.get("status")
            if status is not None and not isinstance(status, str):
                raise TypeError(f"Unexpected status value: {status!r}")
            return data

        except httpx.HTTPStatusError as e:
            logger.error(f"Status check for {request_id} returned HTTP {e.response.status_code}")
            raise StatusCheckError(
                f"Error checking generation: {e}", status_code=e.response.status_code
            ) from e
        except (httpx.HTTPError, *PARSE_ERRORS) as e:
            logger.error(f"Error checking generation {request_id}: {e}")
            raise StatusCheckError(f"Error checking generation: {e}") from e

    def _result_files(self, request_id: str, data: dict) -> List[str]:
        result = data.get("result")
        files = result.get("files") if isinstance(result, dict) else None

        # A bare string would otherwise be split into one image per character
        if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
            logger.error(f"Generation {request_id} finished without usable files: {result!r}")
            raise StatusCheckError(f"Error checking generation: malformed result files: {files!r}")
        return files

    async def iter_generation(self, request_id: str,
                              options: Optional[PollOptions] = None) -> AsyncIterator[ProgressEvent]:
        """
        Poll a job and yield every observation.

        Non-terminal observations are yielded before the delay; the last
        event yielded on success is the DONE one and carries the files.
        FAIL, transport errors and an exhausted budget raise.
        """
        options = options or PollOptions()
        attempts_left = options.attempts

        while attempts_left > 0:
            data = await self._fetch_status(request_id)
            status = data.get("status")

            if status == STATUS_DONE:
                files = self._result_files(request_id, data)
                logger.info(f"Generation {request_id} finished with {len(files)} image(s)")
                yield ProgressEvent(
                    status=status,
                    attempts_left=attempts_left,
                    total_attempts=options.attempts,
                    files=files
                )
                return

            if status == STATUS_FAIL:
                error_msg = data.get("errorDescription") or "Unknown error"
                logger.error(f"Generation {request_id} failed: {error_msg}")
                raise GenerationFailedError(f"Generation failed: {error_msg}")

            if status not in IN_PROGRESS_STATUSES:
                logger.warning(f"Unknown generation status: {status}")

            logger.debug(f"Generation {request_id} status: {status}, {attempts_left} attempt(s) left")
            yield ProgressEvent(
                status=status,
                attempts_left=attempts_left,
                total_attempts=options.attempts
            )

            attempts_left -= 1
            await self._sleep(options.delay_seconds)

        logger.error(f"Generation {request_id} timed out after {options.attempts} attempts")
        raise GenerationTimeoutError("Generation timed out")

    async def check_generation(self, request_id: str,
                               options: Optional[PollOptions] = None,
                               on_progress: Optional[Callable[[ProgressEvent], None]] = None) -> List[str]:
        """
        Wait for a job to finish and return its base64-encoded images
        """
        files = None
        async for event in self.iter_generation(request_id, options):
            if event.done:
                files = event.files
            elif on_progress:
                on_progress(event)

        # iter_generation only finishes normally after a DONE event
        return files

    def save_images(self, images: Sequence[str], sink: ImageSink,
                    options: Optional[SaveOptions] = None) -> List[str]:
        """Emit images to an output sink, returning their filenames"""
        return save_images(images, sink, options)
