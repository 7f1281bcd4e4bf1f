from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.generate_manifest_use_case import (
    GenerateManifestDependencies,
    GenerateManifestUseCase,
)
from .io.manifest_xml_generator import ManifestXMLGenerator
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.manifest_description import ManifestDescriptionRepository

if TYPE_CHECKING:
    from ..application.ports.repositories import ManifestDescriptionRepositoryPort
    from ..application.ports.services import LoggerPort, ManifestXMLGeneratorPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._xml_generator_instance: ManifestXMLGeneratorPort | None = None
        self._description_repository_instance: (
            ManifestDescriptionRepositoryPort | None
        ) = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_xml_generator(self) -> ManifestXMLGeneratorPort:
        if self._xml_generator_instance is None:
            self._xml_generator_instance = ManifestXMLGenerator()
        return self._xml_generator_instance

    def create_description_repository(self) -> ManifestDescriptionRepositoryPort:
        if self._description_repository_instance is None:
            self._description_repository_instance = ManifestDescriptionRepository()
        return self._description_repository_instance

    def create_generate_manifest_use_case(self) -> GenerateManifestUseCase:
        dependencies = GenerateManifestDependencies(
            logger=self.create_logger(),
            xml_generator=self.create_xml_generator(),
        )
        return GenerateManifestUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._xml_generator_instance = None
        self._description_repository_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_xml_generator(self, generator: ManifestXMLGeneratorPort) -> None:
        self._xml_generator_instance = generator

    def override_description_repository(
        self, repository: ManifestDescriptionRepositoryPort
    ) -> None:
        self._description_repository_instance = repository


def create_default_container(
    verbose: int = 0, console: Console | None = None
) -> DependencyContainer:
    return DependencyContainer(verbose=verbose, console=console)
