"""Scaffold generation and provisioning services."""

from .generate import generate_files
from .params import ParamOverrides, collect_params
from .plan import PlannedFile, PlannedStep, ScaffoldPlan, commit_message
from .prerequisites import REQUIRED_TOOLS, check_prerequisites
from .provision import ProvisionOutcome, ProvisionRequest, ProvisionService
from .summary import render_plan, render_summary

__all__ = [
    "REQUIRED_TOOLS",
    "ParamOverrides",
    "PlannedFile",
    "PlannedStep",
    "ProvisionOutcome",
    "ProvisionRequest",
    "ProvisionService",
    "ScaffoldPlan",
    "check_prerequisites",
    "collect_params",
    "commit_message",
    "generate_files",
    "render_plan",
    "render_summary",
]
