from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import time
import logging

import pandas as pd

from contentgraph.graph.graph_store import GraphStore
from contentgraph.graph.errors import DuplicateIdError


@dataclass(frozen=True)
class SeedReport:
    nodes: int = 0
    links: int = 0
    skipped: int = 0


def _optional(row: Any, column: str) -> Optional[Any]:
    if column not in row.index:
        return None
    value = row[column]
    if pd.isna(value):
        return None
    return value


def load_registry_from_seed(
    *,
    store: GraphStore,
    seed_dir: Path,
    caller: str,
) -> SeedReport:
    """
    Replay nodes/links from parquet files through the public registry API.

    Every row goes through the same checks as a live call, so a seed
    cannot create links the acting identity is not allowed to create.
    Rows without a `creator` value are replayed as `caller`.
    Already-registered node ids are skipped; any other error aborts
    the load.
    """
    nodes_path = seed_dir / "nodes.parquet"
    links_path = seed_dir / "links.parquet"

    if not nodes_path.exists():
        return SeedReport()

    logger = logging.getLogger("contentgraph.seed")
    t0 = time.perf_counter()
    nodes_df = pd.read_parquet(nodes_path)
    links_df = pd.read_parquet(links_path) if links_path.exists() else pd.DataFrame()
    logger.info(
        "read nodes=%s links=%s in %.3fs",
        len(nodes_df),
        len(links_df),
        time.perf_counter() - t0,
    )

    nodes = links = skipped = 0

    for _, row in nodes_df.iterrows():
        node_id = str(row["id"])
        creator = _optional(row, "creator") or caller
        try:
            store.register_node(
                node_id,
                str(row.get("label", "") or ""),
                str(row.get("uri", "") or ""),
                caller=str(creator),
            )
        except DuplicateIdError:
            logger.warning("skipping already registered node %s", node_id)
            skipped += 1
            continue
        nodes += 1

        active = _optional(row, "is_active")
        if active is not None and not bool(active):
            store.set_node_active(node_id, False, caller=str(creator))

    for _, row in links_df.iterrows():
        from_id = str(row["from_id"])
        acting = str(_optional(row, "creator") or caller)
        link_id = store.create_link(
            from_id,
            str(row["to_id"]),
            str(row.get("relation", "") or ""),
            caller=acting,
        )
        links += 1

        active = _optional(row, "is_active")
        if active is not None and not bool(active):
            outgoing = [link.id for link in store.get_outgoing_links(from_id)]
            index = outgoing.index(link_id)
            store.set_link_active(from_id, index, False, caller=acting)
            logger.debug("seeded inactive link %s", link_id)

    logger.info(
        "seed replay done nodes=%s links=%s skipped=%s in %.3fs",
        nodes,
        links,
        skipped,
        time.perf_counter() - t0,
    )
    return SeedReport(nodes=nodes, links=links, skipped=skipped)
