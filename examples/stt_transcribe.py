#!/usr/bin/env python3
"""Transcribe a raw PCM file (24kHz, 16-bit, mono) and print voice activity."""

from __future__ import annotations

import sys
import asyncio
import logging
import argparse
from pathlib import Path

if __package__ in {None, ""}:
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from gradium_client import (  # noqa: E402
    STTParams,
    StepReport,
    InputFormat,
    GradiumError,
    GradiumClient,
    EndTextMarker,
    TranscriptSegment,
    configure_logging,
)

logger = logging.getLogger("stt_transcribe")

CHUNK_BYTES = 3840


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream speech-to-text with Gradium")
    p.add_argument("file", help="Audio file to send")
    p.add_argument("--format", default=InputFormat.PCM.value, choices=[f.value for f in InputFormat])
    p.add_argument("--region", default=None, help="eu or us (defaults to GRADIUM_REGION)")
    p.add_argument("--rtf", type=float, default=1.0, help="Real-time factor (1.0=realtime, 0=as fast as possible)")
    p.add_argument("--timeout", type=float, default=60.0)
    p.add_argument("--log-level", default=None)
    return p.parse_args()


async def _send_audio(stream, audio: bytes, rtf: float) -> None:
    # 3840 bytes of 24kHz 16-bit mono PCM is 80ms.
    delay = 0.08 / rtf if rtf > 0 else 0.0
    for offset in range(0, len(audio), CHUNK_BYTES):
        await stream.send_audio(audio[offset : offset + CHUNK_BYTES])
        if delay:
            await asyncio.sleep(delay)
    await stream.send_end_of_stream()


async def run(args: argparse.Namespace) -> int:
    audio = Path(args.file).read_bytes()
    async with GradiumClient(region=args.region) as client:
        async with await client.stt.stream(STTParams(input_format=args.format)) as stream:
            info = await stream.wait_ready(args.timeout)
            logger.info("ready: sample_rate=%d frame_size=%d", info.sample_rate, info.frame_size)

            sender = asyncio.create_task(_send_audio(stream, audio, args.rtf))
            async for item in stream.all():
                if isinstance(item, TranscriptSegment):
                    print(f"[{item.start_s:6.2f}s] {item.text}")
                elif isinstance(item, EndTextMarker):
                    print(f"[{item.stop_s:6.2f}s] --")
                elif isinstance(item, StepReport) and item.vad:
                    logger.debug("step %d inactivity=%.2f", item.step_idx, item.vad[-1].inactivity_prob)
            await sender

            if stream.error is not None:
                raise stream.error
    return 0


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level)
    try:
        code = asyncio.run(run(args))
    except GradiumError as exc:
        logger.error("stt failed: %s", exc)
        code = 1
    sys.exit(code)


if __name__ == "__main__":
    main()
