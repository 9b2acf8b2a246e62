from .nursery import NurseryScraper
from .fallback import ProviderChain
from .parser import parse_profile
from .prompts import PromptBuilder
from .refinement import RefinementService
from .pipeline import CareProfilePipeline
from .recap import CareRecapService
from .batch import BatchReprocessor

__all__ = [
    "NurseryScraper",
    "ProviderChain",
    "parse_profile",
    "PromptBuilder",
    "RefinementService",
    "CareProfilePipeline",
    "CareRecapService",
    "BatchReprocessor",
]
