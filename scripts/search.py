"""Similarity search smoke script using the Buho Suite Vectors node.

Configuration via constants below (no CLI args). Run:
	python scripts/search.py

Environment:
	BUHO_ACCOUNT_ID    account owning the knowledge base
	BUHO_KB_ID         knowledge base to search
	BUHO_HTTP_TIMEOUT  (default 30 seconds)
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import Any, Dict, List

from buho_vectors.config import get_settings
from buho_vectors.node import BuhoVectors, HttpxRequestExecutor, LocalExecutionContext


# ---------------------------------------------------------------------------
# Configuration Constants
# ---------------------------------------------------------------------------
ACCOUNT_ID: str = os.environ.get("BUHO_ACCOUNT_ID", "")
KB_ID: str = os.environ.get("BUHO_KB_ID", "")
QUERY_TEXT: str = "¿Cuál es la política de devoluciones?"
TOP_K: int = 5
CONTINUE_ON_FAIL: bool = False


async def search(query: str, top_k: int = TOP_K) -> List[Dict[str, Any]]:
	"""Run the node on a single item and log the returned records."""
	logger = logging.getLogger(__name__)

	node = BuhoVectors()
	item = {"account_id": ACCOUNT_ID, "kb_id": KB_ID, "query_text": query, "top_k": top_k}
	async with HttpxRequestExecutor() as executor:
		ctx = LocalExecutionContext(
			items=[item],
			http_call=executor,
			tolerate_failures=CONTINUE_ON_FAIL,
			description=node.description,
		)
		outputs = await node.execute(ctx)

	records = [record.to_dict() for record in outputs[0]]
	header = f"Returned {len(records)} record(s). \nQuery: {query!r} \n"
	lines: List[str] = [header]
	for idx, record in enumerate(records, start=1):
		lines.append(f"{idx}. {json.dumps(record['json'], ensure_ascii=False)}")
	logger.info("\n".join(lines))
	return records


def main() -> int:
	logging.basicConfig(
		level=getattr(logging, get_settings().log_level, logging.INFO),
		format="%(asctime)s %(levelname)s %(name)s - %(message)s",
	)
	if not ACCOUNT_ID or not KB_ID:
		logging.warning("BUHO_ACCOUNT_ID and/or BUHO_KB_ID are empty; the API will likely reject the request.")
	try:
		asyncio.run(search(QUERY_TEXT, TOP_K))
		return 0
	except Exception as e:  # pragma: no cover
		logging.exception("Search failed: %s", e)
		return 1

if __name__ == "__main__":  # pragma: no cover
	raise SystemExit(main())
