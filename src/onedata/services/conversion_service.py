"""
onedata.services.conversion_service

ABAP-to-SQL conversion orchestration.

Responsibilities:
- Validate the submitted routine code.
- Build the conversion prompt and call the generation collaborator under a timeout.
- Persist the generated SQL only after a successful generation.
"""

from __future__ import annotations

import asyncio

from onedata.db.models import RoutineStatus
from onedata.db.store import ObjectStore
from onedata.errors import ConversionFailed, InvalidInput, StoreError
from onedata.generation.base import GenerationError, TextGenerator
from onedata.observability.logging import get_logger
from onedata.settings import Settings

log = get_logger(__name__)

PROMPT_TEMPLATE = """\
You are an Expert Principal Data Engineer specializing in refactoring SAP ABAP to Google BigQuery SQL.
Your task is to convert the following SAP BW Transformation Routine into a BigQuery SQL Logic block.

STRICT RULES:
1. Eliminate Loops: Convert LOOP AT statements into SQL JOIN or UNNEST.
2. Handling Lookups: Convert READ TABLE ... WITH KEY into LEFT JOIN.
3. Logic Preservation: Convert IF/ELSE into CASE WHEN.
4. Output ONLY the SQL code block. No markdown, no explanation.

INPUT ABAP CODE:
{abap_code}
"""


def build_prompt(abap_code: str) -> str:
    return PROMPT_TEMPLATE.format(abap_code=abap_code)


class ConversionService:
    def __init__(
        self,
        *,
        store: ObjectStore,
        generator: TextGenerator,
        settings: Settings,
    ) -> None:
        self._store = store
        self._generator = generator
        self._settings = settings

    async def convert(self, *, node_id: str | None, abap_code: str | None) -> str:
        if not abap_code or not abap_code.strip():
            raise InvalidInput("No ABAP code provided")

        log.info("conversion_started", node_id=node_id, model=self._settings.generation_model)
        try:
            sql = await asyncio.wait_for(
                self._generator.generate(
                    model=self._settings.generation_model,
                    prompt=build_prompt(abap_code),
                ),
                timeout=self._settings.generation_timeout_s,
            )
        except TimeoutError as exc:
            log.warning("conversion_timed_out", node_id=node_id)
            raise ConversionFailed("AI Conversion failed") from exc
        except GenerationError as exc:
            log.warning("conversion_failed", node_id=node_id, error=str(exc))
            raise ConversionFailed("AI Conversion failed") from exc
        except Exception as exc:
            # Any other collaborator failure (SDK errors, bad base url) is still a failed conversion.
            log.warning(
                "conversion_failed", node_id=node_id, error_type=type(exc).__name__, error=str(exc)
            )
            raise ConversionFailed("AI Conversion failed") from exc

        if not isinstance(sql, str) or not sql.strip():
            log.warning("conversion_empty", node_id=node_id)
            raise ConversionFailed("AI Conversion failed")

        if node_id:
            try:
                updated = await self._store.upsert_routine_conversion(
                    node_id, sql, RoutineStatus.converted
                )
            except StoreError as exc:
                raise ConversionFailed("AI Conversion failed") from exc
            if not updated:
                log.info("conversion_not_persisted", node_id=node_id, reason="no routine")

        log.info("conversion_succeeded", node_id=node_id, sql_chars=len(sql))
        return sql
