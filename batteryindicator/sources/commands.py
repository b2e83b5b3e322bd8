# batteryindicator/sources/commands.py
from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from ..errors import BatteryUnavailableError

logger = logging.getLogger(__name__)


async def run_command(args: Sequence[str]) -> str:
    """Run a power-status utility and return its stdout; any failure means no battery info."""
    logger.debug("running %s", " ".join(args))
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError as exc:
        raise BatteryUnavailableError(f"{args[0]} unavailable: {exc}") from exc
    out, _ = await proc.communicate()
    if proc.returncode != 0:
        raise BatteryUnavailableError(f"{args[0]} exited with {proc.returncode}")
    return out.decode(errors="replace")
