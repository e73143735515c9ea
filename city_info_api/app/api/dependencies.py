"""
Shared route dependencies.

``require_json_accept`` rejects requests whose ``Accept`` header rules
out JSON with 406 Not Acceptable, since JSON is the only representation
the resource routes produce.  A missing header accepts anything.
"""

from typing import Optional

from fastapi import Header, HTTPException, status

JSON_MEDIA_RANGES = {"application/json", "application/*", "*/*"}


def _accepts_json(accept: str) -> bool:
    for media_range in accept.split(","):
        media_type, *params = [part.strip() for part in media_range.split(";")]
        if media_type.lower() not in JSON_MEDIA_RANGES:
            continue
        quality = 1.0
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            return True
    return False


async def require_json_accept(accept: Optional[str] = Header(None)) -> None:
    if accept and not _accepts_json(accept):
        raise HTTPException(
            status_code=status.HTTP_406_NOT_ACCEPTABLE,
            detail="Only application/json responses are available",
        )
