"""
app.py — HTTP host for the pathfinding engine
=============================================
Thin Flask layer that supplies the engine with a network and hands the
results back as JSON for a browser front-end to animate.

Routes:
  GET  /api/algorithms          – registry listing
  GET  /api/network             – the session's network (airports + routes)
  POST /api/network             – replace the session's network
  POST /api/network/reset       – back to the bundled network file
  POST /api/routes/delay        – set a route's delay (minutes)
  POST /api/routes/frequency    – set a route's flights per day
  POST /api/shortest-path       – authoritative search (alias /shortest-path)
  POST /api/trace               – step trace for replay

State management:
  The network lives in the Flask session, serialised, exactly as the
  browser last saw it.  Every request rebuilds a fresh Graph from it, so
  a delay / frequency change takes effect on the next search and nothing
  computed earlier is reused.  The engine itself holds no state.
"""

import logging
import secrets
from typing import Optional

from flask import Flask, jsonify, request, session

from airpath import config
from airpath.graph import AirportNetwork, GraphError, InvalidArgument
from airpath.algorithms import list_algorithms
from airpath.engine import trace, timed_search

log = logging.getLogger(__name__)


def create_app(network: Optional[AirportNetwork] = None) -> Flask:
    """
    Args:
        network : Default network for new sessions.  Loaded from
                  config.GRAPH_FILE when omitted.
    """
    app = Flask(__name__)
    app.secret_key = secrets.token_hex(32)

    if network is None:
        network = _load_default_network()
    default_data = network.to_dict()
    policy = config.default_policy()

    # ------------------------------------------------------------------
    # Session State Helpers
    # ------------------------------------------------------------------
    def get_network() -> AirportNetwork:
        if "network" not in session:
            session["network"] = default_data
        return AirportNetwork.from_dict(session["network"], policy=policy)

    def save_network(net: AirportNetwork) -> None:
        session["network"] = net.to_dict()

    def request_network(data: dict) -> AirportNetwork:
        """A network sent with the request wins over the session's."""
        if "network" in data:
            return AirportNetwork.from_dict(data["network"], policy=policy)
        return get_network()

    def endpoints(data: dict):
        source, target = data.get("source"), data.get("target")
        if not source or not target:
            return None
        return str(source), str(target)

    # ------------------------------------------------------------------
    # Errors
    # ------------------------------------------------------------------
    @app.errorhandler(GraphError)
    def handle_graph_error(exc: GraphError):
        return jsonify({"error": exc.kind, "message": str(exc)}), 400

    # ------------------------------------------------------------------
    # API: Registry / Network
    # ------------------------------------------------------------------
    @app.route("/api/algorithms")
    def api_algorithms():
        return jsonify([a.to_dict() for a in list_algorithms()])

    @app.route("/api/network", methods=["GET"])
    def api_network_get():
        return jsonify(get_network().to_dict())

    @app.route("/api/network", methods=["POST"])
    def api_network_set():
        net = AirportNetwork.from_dict(request.get_json(silent=True) or {}, policy=policy)
        save_network(net)
        return jsonify(net.to_dict())

    @app.route("/api/network/reset", methods=["POST"])
    def api_network_reset():
        session["network"] = default_data
        return jsonify(default_data)

    @app.route("/api/routes/delay", methods=["POST"])
    def api_route_delay():
        data = request.get_json(silent=True) or {}
        net = get_network()
        weight = net.set_delay(str(data.get("source")), str(data.get("target")), data.get("delay", 0))
        save_network(net)
        return jsonify({"weight": weight})

    @app.route("/api/routes/frequency", methods=["POST"])
    def api_route_frequency():
        data = request.get_json(silent=True) or {}
        net = get_network()
        weight = net.set_frequency(str(data.get("source")), str(data.get("target")), data.get("frequency", 1))
        save_network(net)
        return jsonify({"weight": weight})

    # ------------------------------------------------------------------
    # API: Search
    # ------------------------------------------------------------------
    @app.route("/api/shortest-path", methods=["POST"])
    @app.route("/shortest-path", methods=["POST"])
    def api_shortest_path():
        data = request.get_json(silent=True) or {}
        ends = endpoints(data)
        if ends is None:
            return jsonify({"error": "Source and target airports are required"}), 400
        source, target = ends
        algorithm = data.get("algorithm", "dijkstra")

        net = request_network(data)
        graph = net.build_graph()
        positions = net.positions()
        log.info("Finding %s path from %s to %s", algorithm, source, target)

        result, metrics = timed_search(algorithm, graph, source, target, positions=positions)

        body = result.to_dict()
        body["flightTimeMinutes"] = net.flight_time_minutes(result.path) if result.found else None
        body["metrics"] = metrics.to_dict()
        return jsonify(body)

    # ------------------------------------------------------------------
    # API: Trace
    # ------------------------------------------------------------------
    @app.route("/api/trace", methods=["POST"])
    def api_trace():
        data = request.get_json(silent=True) or {}
        ends = endpoints(data)
        if ends is None:
            return jsonify({"error": "Source and target airports are required"}), 400
        source, target = ends

        net = request_network(data)
        tr = trace(
            net.build_graph(),
            source,
            target,
            positions=net.positions(),
            algorithm=data.get("algorithm", "astar"),
            step_cap=data.get("stepCap"),
            expansion_limit=data.get("expansionLimit"),
        )
        return jsonify(tr.to_dict())

    return app


def _load_default_network() -> AirportNetwork:
    if not config.GRAPH_FILE.exists():
        log.warning("Graph data file not found at %s; starting with an empty network", config.GRAPH_FILE)
        return AirportNetwork(policy=config.default_policy())
    return AirportNetwork.load(config.GRAPH_FILE, policy=config.default_policy())


def main() -> None:
    config.setup_logging()
    app = create_app()
    log.info("Graph data path: %s", config.GRAPH_FILE)
    app.run(host="0.0.0.0", port=5000, debug=False)


if __name__ == "__main__":
    main()
