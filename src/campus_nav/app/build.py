# campus_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from campus_nav.config.models import AppModel
from campus_nav.domain.graph import CampusGraph, build_graph
from campus_nav.domain.locations import LocationIndex
from campus_nav.io.recorder import MemorySink, Recorder
from campus_nav.io.route_logging import RouteLogging  # JSON logs
from campus_nav.routing.hooks import NoopHooks
from campus_nav.routing.resolver import RouteFinder, RouteOutcome
from campus_nav.runtime.resources import EMPTY_DATASET, load_dataset


@dataclass
class App:
    config: AppModel
    graph: CampusGraph
    locations: LocationIndex
    finder: RouteFinder
    recorder: Recorder

    def find_route(
        self, start_name: str | None, end_name: str | None, **overrides
    ) -> RouteOutcome:
        """Query with the configured algorithm/filter unless overridden."""
        return self.finder.find_route(
            start_name,
            end_name,
            algorithm=overrides.get("algorithm", self.config.routing.algorithm),
            accessible_only=overrides.get("accessible_only", self.config.routing.accessible_only),
        )


def build(
    cfg: AppModel | Mapping,
    *,
    dataset: Mapping[str, Any] | None = None,
    use_logging: bool = True,
    recorder: Recorder | None = None,
    log_stream=None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)

    # 1) Data: an explicit dataset wins over the configured file
    if dataset is None:
        if model.dataset is not None:
            dataset = load_dataset(model.dataset.file, must_exist=model.dataset.must_exist)
        else:
            dataset = EMPTY_DATASET
    graph = build_graph(dataset)
    locations = LocationIndex.from_nodes(graph.nodes.values())

    # 2) Hooks & recorder
    hooks = (
        RouteLogging(
            run_id=model.run_id,
            level="DEBUG" if model.log.debug else model.log.level,
            debug=model.log.debug,
            stream=log_stream,
        )
        if use_logging
        else NoopHooks()
    )
    recorder = recorder or Recorder(MemorySink())

    # 3) Resolver
    finder = RouteFinder(
        graph,
        locations,
        meters_per_unit=model.routing.meters_per_unit,
        hooks=hooks,
        recorder=recorder,
        run_id=model.run_id,
    )
    return App(model, graph, locations, finder, recorder)
