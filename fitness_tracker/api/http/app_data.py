from dataclasses import dataclass

from fitness_tracker.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
