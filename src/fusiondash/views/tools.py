"""Crunch, flow and dashboard view models."""

from __future__ import annotations

from fusiondash.views.base import ViewModel


class CrunchColumn(ViewModel):
    id: str
    original_name: str
    friendly_name: str
    data_type: str
    description: str
    sample_values: list[str]
    is_acronym: bool
    acronym_expansion: str


class ProcessStepView(ViewModel):
    id: str
    title: str
    description: str
    owner: str
    role: str
    tools: list[str]
    duration: str
    order: int
    type: str


class Flow(ViewModel):
    process_name: str = ""
    process_description: str = ""
    process_department: str = ""
    steps: list[ProcessStepView] = []


class DashboardStat(ViewModel):
    label: str
    value: int
    trend: str


class GaugeReading(ViewModel):
    value: float
    max: float
    label: str
    display: str


class GaugeCard(ViewModel):
    title: str
    theme: str
    outer: GaugeReading
    inner: GaugeReading
