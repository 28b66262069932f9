"""Incremental database updater.

Routines are applied one at a time and ``db-version`` is persisted after each
of them, so an interrupted pass resumes at the first routine that did not
complete. On a multi-site network the whole sequence is replayed per site,
each site tracking its own version.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass

from siteupdater.adapters.sqlite.site_repository import SqliteSiteRepository
from siteupdater.core.runtime import Runtime
from siteupdater.models.configuration import Scope
from siteupdater.services.options_service import OptionsService
from siteupdater.updater.registry import RoutineRegistry
from siteupdater.updater.version_store import VersionStore

logger = logging.getLogger(__name__)


@dataclass
class UpdateContext:
    """What an update routine gets to work with."""

    scope: Scope
    version: int
    options: OptionsService
    runtime: Runtime
    plugin_slug: str


class UpdateRunner:
    """Applies routines ``current + 1 .. target`` to one scope."""

    def __init__(
        self,
        registry: RoutineRegistry,
        store: VersionStore,
        runtime: Runtime,
        plugin_slug: str,
    ):
        self.registry = registry
        self.store = store
        self.runtime = runtime
        self.plugin_slug = plugin_slug

    def run(self, scope: Scope, target_version: int) -> list[int]:
        """Bring *scope* up to *target_version*.

        Returns:
            The versions applied during this pass, in order

        Raises:
            ValueError: If target_version is negative
            RoutineNotFoundError: If a version in the range has no routine;
                db-version stays at the last applied version
        """
        if target_version < 0:
            raise ValueError(f"Target version must be >= 0, got {target_version}")

        current_version = self.store.read(scope).db_version
        if current_version >= target_version:
            logger.debug(
                "%s already at db-version %s (target %s)",
                scope,
                current_version,
                target_version,
            )
            return []

        applied: list[int] = []
        with self._acting_on(scope), self.runtime.unlimited_execution_time():
            while current_version < target_version:
                next_version = current_version + 1
                routine = self.registry.get(next_version)

                logger.info(
                    "%s: applying update routine %s (%s)",
                    scope,
                    next_version,
                    routine.description,
                )
                try:
                    routine(
                        UpdateContext(
                            scope=scope,
                            version=next_version,
                            options=self.store.options,
                            runtime=self.runtime,
                            plugin_slug=self.plugin_slug,
                        )
                    )
                except Exception:
                    logger.exception(
                        "%s: update routine %s failed, db-version stays at %s",
                        scope,
                        next_version,
                        current_version,
                    )
                    raise

                # A routine may have touched the record itself
                record = self.store.read(scope)
                record.db_version = next_version
                self.store.write(scope, record)

                current_version = next_version
                applied.append(next_version)

        logger.info("%s: updated to db-version %s", scope, current_version)
        return applied

    def _acting_on(self, scope: Scope) -> AbstractContextManager:
        # Routines use plain option calls, so a site scope must be the current site
        if scope.kind == "site":
            return self.runtime.switched_to_site(scope.id)
        return nullcontext()


class MultisiteIterator:
    """Replays the update sequence for every tenant site, one after another."""

    def __init__(self, runner: UpdateRunner, runtime: Runtime):
        self.runner = runner
        self.runtime = runtime

    def run_for_all_tenants(
        self, tenant_ids: Iterable[int], target_version: int
    ) -> dict[int, list[int]]:
        """Run the updater on each site in the given order.

        A failure on one site aborts the pass; sites after it are left as
        they are and pick up from their own db-version next time.
        """
        results: dict[int, list[int]] = {}
        for site_id in tenant_ids:
            with self.runtime.switched_to_site(site_id):
                results[site_id] = self.runner.run(Scope.site(site_id), target_version)
        return results


class Updater:
    """Lifecycle entry point: update the plugin database to a target version."""

    def __init__(
        self,
        options: OptionsService,
        sites: SqliteSiteRepository,
        registry: RoutineRegistry,
        plugin_slug: str,
    ):
        self.options = options
        self.sites = sites
        self.registry = registry
        self.plugin_slug = plugin_slug

    @property
    def runtime(self) -> Runtime:
        return self.options.runtime

    def update(
        self, current_database_version: int, configuration_option_name: str
    ) -> dict[Scope, list[int]]:
        """Run the incremental updates one by one up to *current_database_version*.

        For example, if a scope is at db-version 0 and the target is 2, routines
        1 and 2 run in that order.

        Args:
            current_database_version: The database version expected by the plugin
            configuration_option_name: Option holding the configuration record

        Returns:
            Applied versions per scope
        """
        store = VersionStore(self.options, configuration_option_name)
        runner = UpdateRunner(self.registry, store, self.runtime, self.plugin_slug)

        if not self.runtime.multisite:
            scope = Scope.network(self.runtime.network_id)
            return {scope: runner.run(scope, current_database_version)}

        site_ids = self.sites.list_site_ids(self.runtime.network_id)
        per_site = MultisiteIterator(runner, self.runtime).run_for_all_tenants(
            site_ids, current_database_version
        )
        return {Scope.site(site_id): applied for site_id, applied in per_site.items()}
