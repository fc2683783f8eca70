"""Application bootstrap - wires configuration, storage and services."""

from __future__ import annotations

from typing import Optional

from src.application.stemcell.service import StemcellApplicationService
from src.application.vm.deleter import VmDeleter, default_delete_vm_step_factory
from src.config.manager import ConfigurationManager
from src.infrastructure.cloud.backend_selector import BackendSelectorFactory
from src.infrastructure.events.event_recorder import LoggingEventRecorder
from src.infrastructure.logging.logger import get_logger, setup_logging
from src.infrastructure.persistence.sqlite_stemcell_repository import SQLiteStemcellRepository


class Application:
    """Application context holding the configured services."""

    def __init__(self, config_manager: ConfigurationManager, configure_logging: bool = True) -> None:
        """Initialize the instance."""
        self.config_manager = config_manager
        app_config = config_manager.app_config

        if configure_logging:
            setup_logging(app_config.logging)
        self.logger = get_logger(__name__)

        self.stemcell_repository = SQLiteStemcellRepository(
            app_config.storage.db_path,
            enable_wal=app_config.storage.enable_wal,
        )
        self.backend_selector_factory = BackendSelectorFactory(
            app_config.cpi,
            app_config.default_cloud,
        )
        self.event_recorder = LoggingEventRecorder(user=app_config.director.event_user)
        self.stemcell_service = StemcellApplicationService(
            self.stemcell_repository,
            self.backend_selector_factory,
        )

        self.logger.debug(
            "Application initialized",
            cpi_config=app_config.cpi.enabled,
            db_path=app_config.storage.db_path,
        )

    def vm_deleter(self, force: Optional[bool] = None,
                   enable_virtual_delete_vm: Optional[bool] = None) -> VmDeleter:
        """Build a VM deleter; unset flags fall back to the director config."""
        director = self.config_manager.get_director_config()
        selector = self.backend_selector_factory.for_director()
        return VmDeleter(
            selector,
            default_delete_vm_step_factory(selector, self.event_recorder),
            force=director.force_delete if force is None else force,
            enable_virtual_delete_vm=(
                director.enable_virtual_delete_vms
                if enable_virtual_delete_vm is None else enable_virtual_delete_vm
            ),
        )


def create_application(config_path: Optional[str] = None, configure_logging: bool = True) -> Application:
    """Create an application from a configuration file (or defaults)."""
    return Application(ConfigurationManager(config_path), configure_logging=configure_logging)
