"""Profile runner orchestration."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from ..analysis import assemble_network_profile
from ..core.estimator import NetworkEstimator
from ..core.registry import EstimatorRegistry, RecordSourceRegistry
from ..core.source import RecordSource
from ..core.types import NetworkProfile, ProfileConfig, ProfileContext

logger = logging.getLogger(__name__)


class ProfileRunner:
    """Resolve components from the registries, build a profile and persist it."""

    def __init__(self, config: ProfileConfig) -> None:
        self._config = config
        self._output_path: Optional[Path] = None

    @property
    def output_path(self) -> Optional[Path]:
        return self._output_path

    def run(self) -> NetworkProfile:
        return asyncio.run(self.run_async())

    async def run_async(self) -> NetworkProfile:
        source = self._resolve_source(self._config.source_id, self._config.source_params)
        estimator = self._resolve_estimator(self._config.estimator_id, self._config.estimator_params)
        context = ProfileContext(options=self._config.context_options)

        logger.info(
            "Profiling %s with source=%s estimator=%s",
            self._config.log_source,
            self._config.source_id,
            self._config.estimator_id,
        )
        profile = await assemble_network_profile(
            self._config.log_source,
            context,
            source=source,
            estimator=estimator,
        )

        if self._config.output_path is not None:
            self._output_path = self._write_summary(profile, Path(self._config.output_path))
        return profile

    def _write_summary(self, profile: NetworkProfile, output_path: Path) -> Path:
        summary: Dict[str, Any] = {
            "log_source": str(self._config.log_source),
            "source": self._config.source_id,
            "estimator": self._config.estimator_id,
            "generated_at": time.time(),
            "profile": profile.to_dict(include_records=self._config.include_records),
        }
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(summary, indent=2))
        logger.info("Profile written to %s", output_path)
        return output_path

    @staticmethod
    def _resolve_source(source_id: str, params: Any) -> RecordSource:
        return RecordSourceRegistry.create(source_id, **dict(params or {}))

    @staticmethod
    def _resolve_estimator(estimator_id: str, params: Any) -> NetworkEstimator:
        return EstimatorRegistry.create(estimator_id, **dict(params or {}))


__all__ = ["ProfileRunner"]
