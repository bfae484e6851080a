"""Sample manifest generation integration tests."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest
from dto_schema_sync.generation_run import GenerationRequest, execute_schema_generation_run


def _copy_samples(tmp_path: Path) -> Path:
    samples_dir = Path(__file__).resolve().parents[3] / "samples"
    for name in ("sample-config.yaml", "sample-dtos.yaml"):
        shutil.copy(samples_dir / name, tmp_path / name)
    return tmp_path / "sample-config.yaml"


def test_sample_manifest_generates_every_dto(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    config_path = _copy_samples(tmp_path)

    with caplog.at_level(logging.INFO, logger="dto_schema_sync"):
        outcome = execute_schema_generation_run(GenerationRequest(config_path=str(config_path)))

    output_directory = tmp_path / "build" / "app" / "api" / "dtos"
    assert sorted(path.name for path in outcome.written_paths) == [
        "AddressSchema.ts",
        "CustomerSchema.ts",
        "OpeningHoursSchema.ts",
    ]
    assert outcome.omitted_field_count == 1

    customer = (output_directory / "CustomerSchema.ts").read_text(encoding="utf-8")
    assert customer.splitlines()[:4] == [
        "import { z } from 'zod';",
        "import { zDateOnly } from '../zod-mods';",
        "import { AddressSchema } from './AddressSchema';",
        "import { OpeningHoursSchema } from './OpeningHoursSchema';",
    ]
    assert "  createdAt: z.date(),\n" in customer
    assert "  loyaltyPoints: z.number(),\n" in customer
    assert "  storeHours: z.array(OpeningHoursSchema),\n" in customer
    assert "scoreHistory" not in customer
    assert customer.endswith("export type Customer = z.infer<typeof CustomerSchema>;\n")

    opening_hours = (output_directory / "OpeningHoursSchema.ts").read_text(encoding="utf-8")
    assert opening_hours.count("from '../zod-mods';") == 2

    error_messages = [
        record.getMessage() for record in caplog.records if record.levelno == logging.ERROR
    ]
    assert len(error_messages) == 1
    assert "'scoreHistory'" in error_messages[0]
    assert "'Customer'" in error_messages[0]
