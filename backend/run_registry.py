import json
import logging
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.app.config import AppConfig  # noqa: E402
from contentgraph.events.event_bus import EventBus  # noqa: E402
from contentgraph.graph.errors import UnauthorizedError  # noqa: E402
from contentgraph.graph.graph_store import GraphStore  # noqa: E402
from contentgraph.utils.ids import content_id  # noqa: E402


def main() -> None:
    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logger = logging.getLogger("contentgraph.run")
    start = time.perf_counter()

    bus = EventBus()
    bus.subscribe(lambda recorded: logger.info(json.dumps(recorded.to_dict())))
    store = GraphStore(config.registry_config(), events=bus)

    creator = "0x00000000000000000000000000000000000000c1"
    stranger = "0x00000000000000000000000000000000000000c2"

    n1 = content_id("doc1")
    n2 = content_id("doc2")
    store.register_node(n1, "doc1", "ipfs://x", caller=creator)
    store.register_node(n2, "doc2", "ipfs://y", caller=creator)
    store.create_link(n1, n2, "derived-from", caller=creator)

    outgoing = store.get_outgoing_links(n1)
    logger.info("outgoing(%s) = %d link(s) -> %s", n1[:10], len(outgoing), outgoing[0].to_id[:10])

    try:
        store.create_link(n2, n1, "x", caller=stranger)
    except UnauthorizedError as exc:
        logger.info("stranger rejected as expected: %s", exc)

    store.set_link_active(n1, 0, False, caller=creator)
    mirrored = store.get_incoming_links(n2)[0]
    logger.info("incoming mirror active=%s", mirrored.is_active)

    logger.info(json.dumps(store.stats(), indent=2))
    logger.info("done in %.3fs (%d events)", time.perf_counter() - start, len(bus))


if __name__ == "__main__":
    main()
