"""Crunch and flow tool composers."""

import logging

from fusiondash.core.base import Composer
from fusiondash.core.joins import parse_json
from fusiondash.views.tools import CrunchColumn, Flow, ProcessStepView

logger = logging.getLogger(__name__)


class ToolsComposer(Composer):
    async def crunch_columns(self) -> list[CrunchColumn]:
        rows = await self._store.crunch_columns()
        return [
            CrunchColumn(
                id=r.id,
                original_name=r.original_name,
                friendly_name=r.friendly_name,
                data_type=r.data_type,
                description=r.description,
                sample_values=[str(v) for v in parse_json(r.sample_values, [])],
                is_acronym=r.is_acronym,
                acronym_expansion=r.acronym_expansion,
            )
            for r in rows
        ]

    async def flow(self) -> Flow:
        """The first process and its steps in order; empty when none exists."""
        processes = await self._store.processes()
        if not processes:
            return Flow()
        process = processes[0]
        steps = await self._store.process_steps(process.id)
        return Flow(
            process_name=process.name,
            process_description=process.description,
            process_department=process.department,
            steps=[
                ProcessStepView(
                    id=s.id,
                    title=s.title,
                    description=s.description,
                    owner=s.owner,
                    role=s.role,
                    tools=[str(t) for t in parse_json(s.tools, [])],
                    duration=s.duration,
                    order=s.sort_order,
                    type=s.type,
                )
                for s in steps
            ],
        )
