#!/usr/bin/env python3
"""Stream synthesized speech to a file."""

from __future__ import annotations

import sys
import time
import asyncio
import logging
import argparse
from pathlib import Path

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from gradium_client import (  # noqa: E402
    TTSParams,
    GradiumError,
    OutputFormat,
    GradiumClient,
    configure_logging,
)

logger = logging.getLogger("tts_stream")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream text-to-speech from Gradium")
    p.add_argument("--text", default="Hello, world!", help="Text to synthesize")
    p.add_argument("--voice", default="YTpq7expH9539ERJ", help="Voice ID")
    p.add_argument("--format", default=OutputFormat.WAV.value, choices=[f.value for f in OutputFormat])
    p.add_argument("--model", default=None, help="Model name (server default when omitted)")
    p.add_argument("--region", default=None, help="eu or us (defaults to GRADIUM_REGION)")
    p.add_argument("--out", default="output.wav", help="Where to write the audio")
    p.add_argument("--timeout", type=float, default=30.0, help="Seconds to wait for ready and for the audio")
    p.add_argument("--log-level", default=None)
    return p.parse_args()


async def run(args: argparse.Namespace) -> int:
    params = TTSParams(voice_id=args.voice, output_format=args.format, model_name=args.model)
    async with GradiumClient(region=args.region) as client:
        async with await client.tts.stream(params) as stream:
            t0 = time.perf_counter()
            info = await stream.wait_ready(args.timeout)
            logger.info("ready: request_id=%s model=%s", info.request_id, info.model_name)

            await stream.send_text(args.text)
            await stream.send_end_of_stream()

            total = 0
            first_chunk_s: float | None = None
            with open(args.out, "wb") as fh:
                async for chunk in stream.audio():
                    if first_chunk_s is None:
                        first_chunk_s = time.perf_counter() - t0
                    fh.write(chunk)
                    total += len(chunk)

            if stream.error is not None:
                raise stream.error

    logger.info("wrote %d bytes to %s (first chunk after %.3fs)", total, args.out, first_chunk_s or 0.0)
    return 0


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)
    try:
        code = asyncio.run(run(args))
    except GradiumError as exc:
        logger.error("tts failed: %s", exc)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
