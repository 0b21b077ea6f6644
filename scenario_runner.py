"""
CLI to run the graph algorithms and debt simplification over YAML scenarios.

Reads scenarios/scenarios.yml (or the path given on the command line), builds
each graph or ledger, runs every algorithm that applies and prints the results.
Settlements can additionally be written to a CSV file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple
import argparse
import csv
import logging
import time

import yaml

from adjacency_list_graph import Graph, WeightedGraph
from dijkstra_engine import Dijkstra
from graph import DirectedGraph
from kruskal import Kruskal
from splitwise import Settlement, Splitwise
from topological_sort import CycleDetectedError, TopologicalSort
from traversal import BFSGraphTraversal, DFSGraphTraversal


logger = logging.getLogger(__name__)

SETTLEMENT_FIELDS = ["ledger", "mode", "source", "destination", "weight"]


@dataclass(frozen=True)
class GraphScenario:
    name: str
    nodes: int
    weighted: bool
    edges: Sequence[Tuple]
    source: int = 0


@dataclass(frozen=True)
class LedgerScenario:
    name: str
    transactions: Sequence[Tuple[str, str, float]]


@dataclass(frozen=True)
class Config:
    graphs: Sequence[GraphScenario]
    ledgers: Sequence[LedgerScenario]


def _require(entry: Dict[str, object], key: str, kind: str) -> object:
    if key not in entry:
        raise ValueError(f"{kind} entry {entry} is missing {key!r}")
    return entry[key]


def load_config(path: Path) -> Config:
    data = yaml.safe_load(path.read_text()) or {}

    graphs = []
    for entry in data.get("graphs") or []:
        name = str(_require(entry, "name", "graph"))
        nodes = int(_require(entry, "nodes", "graph"))  # type: ignore[arg-type]
        weighted = bool(entry.get("weighted", False))
        arity = 3 if weighted else 2
        edges = [tuple(edge) for edge in entry.get("edges") or []]
        for edge in edges:
            if len(edge) != arity:
                raise ValueError(
                    f"graph {name!r}: edge {list(edge)} should have {arity} items"
                )
        graphs.append(
            GraphScenario(
                name=name,
                nodes=nodes,
                weighted=weighted,
                edges=edges,
                source=int(entry.get("source", 0)),
            )
        )

    ledgers = []
    for entry in data.get("ledgers") or []:
        name = str(_require(entry, "name", "ledger"))
        transactions = []
        for tx in entry.get("transactions") or []:
            if len(tx) != 3:
                raise ValueError(
                    f"ledger {name!r}: transaction {tx} should be [source, destination, weight]"
                )
            transactions.append((str(tx[0]), str(tx[1]), float(tx[2])))
        ledgers.append(LedgerScenario(name=name, transactions=transactions))

    return Config(graphs=graphs, ledgers=ledgers)


def build_graph(scenario: GraphScenario) -> DirectedGraph:
    """Build the scenario's graph, logging (and skipping) rejected edges."""
    graph: DirectedGraph
    if scenario.weighted:
        weighted = WeightedGraph(scenario.nodes)
        for src, dst, cost in scenario.edges:
            if not weighted.add_edge(int(src), int(dst), float(cost)):
                logger.warning("graph %s: rejected edge %s -> %s (%s)", scenario.name, src, dst, cost)
        graph = weighted
    else:
        plain = Graph(scenario.nodes)
        for src, dst in scenario.edges:
            if not plain.add_edge(int(src), int(dst)):
                logger.warning("graph %s: rejected edge %s -> %s", scenario.name, src, dst)
        graph = plain
    return graph


def run_graph_scenario(scenario: GraphScenario) -> Dict[str, object]:
    graph = build_graph(scenario)
    result: Dict[str, object] = {
        "graph": scenario.name,
        "nodes": graph.nodes_count,
        "edges": graph.edge_count(),
        "dfs": list(DFSGraphTraversal(graph).visit_order(scenario.source)),
        "bfs": list(BFSGraphTraversal(graph).visit_order(scenario.source)),
    }

    try:
        result["topological"] = TopologicalSort(graph).order()
    except CycleDetectedError as exc:
        logger.info("graph %s: %s", scenario.name, exc)
        result["topological"] = None

    if isinstance(graph, WeightedGraph):
        result["dijkstra"] = Dijkstra(graph).minimum_weights(scenario.source)
        kruskal = Kruskal(graph)
        result["mst"] = kruskal.minimum_spanning_tree()
        result["mst_cost"] = kruskal.total_cost()
    return result


def run_ledger_scenario(scenario: LedgerScenario) -> Dict[str, object]:
    ledger = Splitwise()
    for source, destination, weight in scenario.transactions:
        try:
            ledger.add_transaction(source, destination, weight)
        except ValueError as exc:
            logger.warning(
                "ledger %s: rejected transaction %s -> %s (%s)", scenario.name, source, destination, exc
            )

    return {
        "ledger": scenario.name,
        "transactions": len(ledger.transactions),
        "balances": ledger.balances(),
        "simplified": ledger.simplify(),
        "pairwise": ledger.net_pairs(),
    }


def run_scenarios(
    config_path: Path,
    settlements_csv: Optional[Path] = None,
) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    results: List[Dict[str, object]] = []
    for graph_scenario in cfg.graphs:
        results.append(run_graph_scenario(graph_scenario))
        logger.info("[run] completed graph=%s", graph_scenario.name)
    for ledger_scenario in cfg.ledgers:
        results.append(run_ledger_scenario(ledger_scenario))
        logger.info("[run] completed ledger=%s", ledger_scenario.name)

    if settlements_csv:
        write_settlements_csv(results, settlements_csv)

    logger.info("[run] completed %d scenarios in %.2fs", len(results), time.time() - start)
    return results


def settlement_rows(results: List[Dict[str, object]]) -> List[Dict[str, object]]:
    """Flatten ledger results into one row per settlement and mode."""
    rows: List[Dict[str, object]] = []
    for res in results:
        if "ledger" not in res:
            continue
        for mode in ("simplified", "pairwise"):
            settlements: List[Settlement] = res[mode]  # type: ignore[assignment]
            for s in settlements:
                rows.append(
                    {
                        "ledger": res["ledger"],
                        "mode": mode,
                        "source": s.source,
                        "destination": s.destination,
                        "weight": s.weight,
                    }
                )
    return rows


def write_settlements_csv(results: List[Dict[str, object]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=SETTLEMENT_FIELDS)
        writer.writeheader()
        writer.writerows(settlement_rows(results))


def format_result(res: Dict[str, object]) -> str:
    if "ledger" in res:
        lines = [f"ledger {res['ledger']} ({res['transactions']} transactions)"]
        for mode in ("simplified", "pairwise"):
            settlements: List[Settlement] = res[mode]  # type: ignore[assignment]
            pays = ", ".join(f"{s.source}->{s.destination}:{s.weight}" for s in settlements)
            lines.append(f"  {mode}: {pays or '-'}")
        return "\n".join(lines)

    lines = [f"graph {res['graph']} ({res['nodes']} nodes, {res['edges']} edges)"]
    for key in ("dfs", "bfs", "topological", "dijkstra", "mst", "mst_cost"):
        if key not in res:
            continue
        value = res[key]
        if key == "topological" and value is None:
            value = "cyclic"
        lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        default=Path(__file__).parent / "scenarios" / "scenarios.yml",
    )
    parser.add_argument("--settlements-csv", type=Path, default=None)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    results = run_scenarios(args.config, settlements_csv=args.settlements_csv)
    for res in results:
        print(format_result(res))
    if args.settlements_csv:
        print(f"Wrote settlements to {args.settlements_csv}")


if __name__ == "__main__":
    main()
