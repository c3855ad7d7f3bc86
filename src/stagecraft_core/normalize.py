"""Shorthand normalization applied before any defaults are merged."""

from __future__ import annotations

from typing import Any

from .merge import is_record

ROUTER_BASE_MARKER = "_routerBaseSpecified"


def normalize_options(options: dict[str, Any]) -> dict[str, Any]:
    """Rewrite shorthand forms on ``options`` in place and return it.

    ``options`` must already be a copy: nested records that get rewritten are
    replaced rather than edited, but the top level is modified directly.

    - ``loading=True`` is dropped so the default loading record applies.
    - ``router.middleware="auth"`` becomes ``["auth"]``.
    - ``router.base`` given as a string sets ``_routerBaseSpecified``.
    - ``transition="fade"`` becomes ``{"name": "fade"}``.
    """
    if options.get("loading") is True:
        del options["loading"]

    router = options.get("router")
    if is_record(router):
        if isinstance(router.get("middleware"), str):
            router = {**router, "middleware": [router["middleware"]]}
            options["router"] = router
        # An already-resolved tree carries the marker; keep its answer since
        # the defaulted base is indistinguishable from a user-supplied one.
        if ROUTER_BASE_MARKER not in options:
            options[ROUTER_BASE_MARKER] = isinstance(router.get("base"), str)
    elif ROUTER_BASE_MARKER not in options:
        options[ROUTER_BASE_MARKER] = False

    if isinstance(options.get("transition"), str):
        options["transition"] = {"name": options["transition"]}

    return options
