# Kandinsky Generator - Fusion Brain text-to-image client
# Copyright (C) 2025 brokechubb
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.

import argparse
import asyncio
import binascii
import logging
import sys
from typing import Callable, List, Optional

import config
from kandinsky.clients.async_client import KandinskyClient
from kandinsky.exceptions.kandinsky_exceptions import KandinskyError
from kandinsky.models.generation_models import (
    GenerationOptions,
    PollOptions,
    ProgressEvent,
)
from media.image_saver import FileSystemSink, ImageSink, SaveOptions
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def generate_images(client: KandinskyClient, prompt: str, sink: ImageSink,
                          options: Optional[GenerationOptions] = None,
                          poll_options: Optional[PollOptions] = None,
                          save_options: Optional[SaveOptions] = None,
                          on_progress: Optional[Callable[[ProgressEvent], None]] = None) -> List[str]:
    """Run pipeline lookup, submission, polling and saving in order"""
    pipeline_id = await client.get_pipeline()
    request_id = await client.generate(prompt, pipeline_id, options)
    images = await client.check_generation(request_id, poll_options, on_progress)
    return client.save_images(images, sink, save_options)


def log_progress(event: ProgressEvent):
    logger.info(
        f"⏳ Status {event.status}, "
        f"{event.attempts_left}/{event.total_attempts} attempts left"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate images with Kandinsky on Fusion Brain")
    parser.add_argument("prompt", help="Text description of the image")
    parser.add_argument("--negative-prompt", default=None, help="What the image should not contain")
    parser.add_argument("--style", default=None, help="Style preset name")
    parser.add_argument("--width", type=int, default=1024)
    parser.add_argument("--height", type=int, default=576)
    parser.add_argument("--num-images", type=int, default=1)
    parser.add_argument("--output-dir", default=config.IMAGE_OUTPUT_DIR)
    parser.add_argument("--prefix", default=config.IMAGE_FILE_PREFIX)
    return parser


async def run(args: argparse.Namespace) -> List[str]:
    options = GenerationOptions(
        width=args.width,
        height=args.height,
        num_images=args.num_images,
        style=args.style,
        negative_prompt=args.negative_prompt
    )
    poll_options = PollOptions(
        attempts=config.GENERATION_POLL_ATTEMPTS,
        delay=config.GENERATION_POLL_DELAY_MS
    )
    sink = FileSystemSink(args.output_dir)

    async with KandinskyClient(
        config.FUSIONBRAIN_API_KEY,
        config.FUSIONBRAIN_SECRET_KEY,
        config.FUSIONBRAIN_API_URL,
        timeout=config.FUSIONBRAIN_REQUEST_TIMEOUT
    ) as client:
        filenames = await generate_images(
            client,
            args.prompt,
            sink,
            options=options,
            poll_options=poll_options,
            save_options=SaveOptions(prefix=args.prefix),
            on_progress=log_progress
        )

    return [sink.path_for(name) for name in filenames]


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point"""
    setup_logging(config.LOG_LEVEL, log_to_file=config.LOG_TO_FILE, log_file_path=config.LOG_FILE_PATH)
    args = build_parser().parse_args(argv)

    if not config.FUSIONBRAIN_API_KEY or not config.FUSIONBRAIN_SECRET_KEY:
        logger.error("❌ FUSIONBRAIN_API_KEY and FUSIONBRAIN_SECRET_KEY must be set. Please check your .env file.")
        return 1

    logger.info("🚀 Starting generation...")
    try:
        paths = asyncio.run(run(args))
    except KandinskyError as e:
        logger.error(f"💀 {e}")
        return 1
    except (OSError, binascii.Error) as e:
        # binascii.Error is a ValueError, keep this branch first
        logger.error(f"💾 Could not write images to {args.output_dir}: {e}")
        return 1
    except ValueError as e:
        logger.error(f"❌ Invalid request: {e}")
        return 1

    for path in paths:
        print(path)
    logger.info(f"✅ Saved {len(paths)} image(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
