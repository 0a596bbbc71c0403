"""Shareable state tokens and compact labels.

A state token looks like ``17-006-00-000``: ``yy`` unpadded, the other
fields zero-padded to fixed width. Links built from these tokens are
public, so the format must stay stable.
"""

from __future__ import annotations

from metric_clock.core.metric import MetricTime

STATE_SEPARATOR = "-"
STATE_PARTS = 4

__all__ = ["format_label", "format_state", "parse_state"]


def format_state(metric: MetricTime) -> str:
    return f"{metric.yy}-{metric.ddd:03d}-{metric.hh:02d}-{metric.mmm:03d}"


def parse_state(token: str | None) -> MetricTime | None:
    """Parse a state token, returning ``None`` when it is absent or malformed.

    A leading ``-`` belongs to ``yy`` so pre-epoch tokens such as
    ``-1-995-00-000`` parse back to the instant they were made from.
    """
    if not token:
        return None

    text = token.strip()
    sign = 1
    if text.startswith(STATE_SEPARATOR):
        sign = -1
        text = text[len(STATE_SEPARATOR):]

    parts = text.split(STATE_SEPARATOR)
    if len(parts) != STATE_PARTS:
        return None

    values: list[int] = []
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            return None
        try:
            values.append(int(part))
        except ValueError:
            return None

    yy, ddd, hh, mmm = values
    return MetricTime(yy=sign * yy, ddd=ddd, hh=hh, mmm=mmm)


def format_label(metric: MetricTime) -> str:
    """Short label for navigation buttons.

    The time of day is only shown when both ``hh`` and ``mmm`` are nonzero.
    """
    if metric.hh and metric.mmm:
        return format_state(metric)
    return f"{metric.yy}-{metric.ddd:03d}"
