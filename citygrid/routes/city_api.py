"""
project: citygrid
module: city_api.py
License: MIT

City layout API routes.

Each request runs the generator once and returns the finished document. The
structural layout is identical on every call; only cosmetic variants (tree and
bench models) change unless a seed is pinned via config or ``?seed=``.
"""
from flask import Blueprint, current_app, jsonify, request

from citygrid.city import City, CityConfig, list_recipes
from citygrid.city.config import coerce_seed

bp_city = Blueprint("city", __name__)


def _config_from_request() -> CityConfig:
    cfg = current_app.config
    seed = request.args.get("seed")
    return CityConfig(
        recipe=request.args.get("recipe") or cfg.get("CITYGRID_RECIPE", "greenwich_village"),
        seed=coerce_seed(seed if seed is not None else cfg.get("CITYGRID_SEED")),
        enable_metrics=bool(cfg.get("CITYGRID_ENABLE_METRICS", True)),
    )


def _unknown_recipe(name):
    return jsonify({"error": f"unknown recipe: {name}", "recipes": list_recipes()}), 404


@bp_city.route("/api/city")
def city_layout():
    """
    Generate a city and return the layout document.
    Response: { 'grid': [[cell, ...], ...], 'characterCount': int, 'carCount': int,
                'zoom': number, 'visualSettings': {...}, 'timestamp': int }
    """
    config = _config_from_request()
    try:
        city = City(config)
    except FileNotFoundError:
        return _unknown_recipe(config.recipe)
    return jsonify(city.document().to_dict())


@bp_city.route("/api/city/metrics")
def city_metrics():
    """
    Generate a city with metrics enabled and return the counters.
    Response: { 'recipe': str, 'seed': int|null, 'metrics': {...} }
    """
    config = _config_from_request()
    config.enable_metrics = True
    try:
        city = City(config)
    except FileNotFoundError:
        return _unknown_recipe(config.recipe)
    return jsonify({"recipe": config.recipe, "seed": config.seed, "metrics": city.metrics})


@bp_city.route("/api/city/recipes")
def city_recipes():
    """Return the names of the bundled recipes. Response: { 'recipes': [...] }"""
    return jsonify({"recipes": list_recipes()})
