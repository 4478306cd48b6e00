# htree/app/build.py
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from htree.config.models import TreeConfig, TreeModel
from htree.domain.entities.geometry import Segment
from htree.domain.tree import HTree
from htree.io.traversal_logging import TraversalLogging  # JSON logs
from htree.traversal.hooks import NoopHooks, TraversalHooks


@dataclass
class App:
    tree: HTree
    hooks: TraversalHooks

    def segments(self) -> Iterator[Segment]:
        return self.tree.segments(hooks=self.hooks)


def make_tree(model: TreeModel) -> HTree:
    return HTree(order=model.order, numeric=model.numeric)


def build(cfg: TreeConfig | Mapping | None = None, *, use_logging: bool = True) -> App:
    # 0) Validate config
    if cfg is None:
        cfg = {}
    model = cfg if isinstance(cfg, TreeConfig) else TreeConfig.model_validate(cfg)

    # 1) Tree (order & numeric type are validated again by HTree itself)
    tree = make_tree(model.tree)

    # 2) Hooks
    hooks = (
        TraversalLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    return App(tree, hooks)
