# connects the service to the terminal: shows the loading view, fetches once, shows the result.

from __future__ import annotations
import logging
import os
import sys
from typing import List
from .models import DisplayState, Loading, Failed, Loaded
from .service import fetch_async, to_display_state

TITLE = "UTEP 7-Day Weather Forecast"


def render(state: DisplayState) -> List[str]:
    lines = [TITLE, "=" * len(TITLE)]
    if isinstance(state, Loading):
        lines.append("Loading...")
    elif isinstance(state, Failed):
        lines.append(state.message)
    elif isinstance(state, Loaded):
        # glyph first, then the date as title and the label as subtitle
        lines.extend(f"{day.pictogram}  {day.date}  {day.description}" for day in state.days)
    else:
        raise TypeError(f"Unknown display state: {state!r}")
    return lines


def _log_level() -> int:
    # unknown names fall back to INFO rather than stopping the app before it renders
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def main() -> int:
    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("\n".join(render(Loading())))
    state = to_display_state(fetch_async())
    print()
    print("\n".join(render(state)))
    # no automatic retry: run again to re-fetch
    return 1 if isinstance(state, Failed) else 0


if __name__ == "__main__":
    sys.exit(main())
