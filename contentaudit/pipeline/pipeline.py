from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from contentaudit.pipeline.models import AuditOptions, AuditOutcome, CollectionFault, RunState
from contentaudit.pipeline.reporter import Outcome
from contentaudit.schema.provider import SchemaProvider
from contentaudit.store.base import BaseDocumentStore


@dataclass(slots=True)
class RunContext:
    store: BaseDocumentStore
    schema_provider: SchemaProvider
    root_path: Path
    options: AuditOptions = field(default_factory=AuditOptions)
    state: RunState = field(default_factory=RunState)
    outcomes: dict[str, AuditOutcome] = field(default_factory=dict)
    faults: list[CollectionFault] = field(default_factory=list)
    outcome: Outcome | None = None

    @property
    def verbose(self) -> bool:
        return self.options.verbose


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: RunContext) -> RunContext:
        raise NotImplementedError
