"""Shared validator helper modules referenced by generated schemas."""

from __future__ import annotations

from pathlib import Path

from dto_schema_sync.configuration.runtime_settings import DEFAULT_TARGET, TargetSettings
from dto_schema_sync.type_resolution.field_type_resolver import (
    DATE_ONLY_HELPER,
    DAY_OF_WEEK_HELPER,
    TIME_ONLY_HELPER,
)

DATE_AND_TIME_MODULE = "date-and-time"

_DATE_AND_TIME_TEMPLATE = """export const REGEX_TIME = /^([01]\\d|2[0-3]):([0-5]\\d):([0-5]\\d)$/;

export const REGEX_DATE =
  /^(?:19|20)\\d\\d-(0[1-9]|1[0-2])-(0[1-9]|[12][0-9]|3[01])$/;

export const DayOfWeek = {
  MONDAY: 'Monday',
  TUESDAY: 'Tuesday',
  WEDNESDAY: 'Wednesday',
  THURSDAY: 'Thursday',
  FRIDAY: 'Friday',
  SATURDAY: 'Saturday',
  SUNDAY: 'Sunday'
};
"""

_VALIDATOR_HELPERS_TEMPLATE = """import {{ {core} }} from '{library}';
import {{ isValid, parseISO }} from 'date-fns';
import {{ DayOfWeek, REGEX_DATE, REGEX_TIME }} from './{date_and_time}';

const days = DayOfWeek;

export const {date_only} = {core}
  .string()
  .regex(REGEX_DATE)
  .refine((arg) => (isValid(parseISO(arg)) ? arg : false));

export const {time_only} = {core}.string().regex(REGEX_TIME);

export const {day_of_week} = {core}
  .string()
  .refine((arg) => Object.keys(days).includes(arg));
"""


class HelperScaffoldError(Exception):
    """Raised when helper modules cannot be written."""


def build_helper_modules(target: TargetSettings = DEFAULT_TARGET) -> dict[str, str]:
    """Return helper file names mapped to their source text."""
    helpers_file = f"{Path(target.helpers_module).name}{target.file_extension}"
    return {
        helpers_file: _VALIDATOR_HELPERS_TEMPLATE.format(
            core=target.core_symbol,
            library=target.validation_library,
            date_and_time=DATE_AND_TIME_MODULE,
            date_only=DATE_ONLY_HELPER,
            time_only=TIME_ONLY_HELPER,
            day_of_week=DAY_OF_WEEK_HELPER,
        ),
        f"{DATE_AND_TIME_MODULE}{target.file_extension}": _DATE_AND_TIME_TEMPLATE,
    }


def write_helper_modules(
    output_dir: Path | str,
    target: TargetSettings = DEFAULT_TARGET,
    *,
    overwrite: bool = False,
) -> list[Path]:
    """Write the helper modules into ``output_dir`` and return their resolved paths.

    Raises:
      HelperScaffoldError: If a helper file exists and ``overwrite`` is False, or
        if the files cannot be written.
    """
    destination_dir = Path(output_dir)
    modules = build_helper_modules(target)
    if not overwrite:
        existing = [name for name in modules if (destination_dir / name).exists()]
        if existing:
            raise HelperScaffoldError(
                f"Helper module already exists: {(destination_dir / existing[0]).resolve()}"
            )

    written: list[Path] = []
    try:
        destination_dir.mkdir(parents=True, exist_ok=True)
        for file_name, content in modules.items():
            destination = destination_dir / file_name
            destination.write_text(content, encoding="utf-8")
            written.append(destination.resolve())
    except OSError as exc:
        raise HelperScaffoldError(f"Failed to write helper modules: {exc}") from exc
    return written
