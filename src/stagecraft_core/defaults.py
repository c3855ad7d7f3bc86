"""Built-in default option tree.

``default_tree()`` returns a read-only snapshot built on first use and shared
by every resolution call. Callers that need a mutable copy go through
``merge.copy_value``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from .merge import freeze

DEFAULT_BUILD_DIR = ".stagecraft"
DEFAULT_MODULES_DIR = "node_modules"
DEFAULT_PUBLIC_PATH = "/_stagecraft/"


def _build_defaults() -> dict[str, Any]:
    # dev and debug are derived per call (environment signal / dev mirror),
    # ssr flags are left unset for the mode preset to fill.
    return {
        "mode": "universal",
        "buildDir": DEFAULT_BUILD_DIR,
        "modulesDir": DEFAULT_MODULES_DIR,
        "build": {
            "analyze": False,
            "extractCSS": False,
            "cssSourceMap": True,
            "ssr": None,
            "publicPath": DEFAULT_PUBLIC_PATH,
            "filenames": {
                "css": "common.[contenthash].css",
                "manifest": "manifest.[hash].js",
                "vendor": "vendor.[chunkhash].js",
                "app": "app.[chunkhash].js",
                "chunk": "[name].[chunkhash].js",
            },
            "vendor": [],
            "plugins": [],
            "babel": {},
            "postcss": {},
            "templates": [],
            "watch": [],
            "devMiddleware": {},
            "hotMiddleware": {},
        },
        "generate": {
            "dir": "dist",
            "routes": [],
            "concurrency": 500,
            "interval": 0,
            "minify": {
                "collapseBooleanAttributes": True,
                "collapseWhitespace": True,
                "decodeEntities": True,
                "minifyCSS": True,
                "minifyJS": True,
                "processConditionalComments": True,
                "removeAttributeQuotes": False,
                "removeComments": False,
                "removeEmptyAttributes": True,
                "removeOptionalTags": True,
                "removeRedundantAttributes": True,
                "removeScriptTypeAttributes": False,
                "removeStyleLinkTypeAttributes": False,
                "removeTagWhitespace": False,
                "sortAttributes": True,
                "sortClassName": False,
                "trimCustomFragments": True,
                "useShortDoctype": True,
            },
        },
        "env": {},
        "head": {
            "meta": [],
            "link": [],
            "style": [],
            "script": [],
        },
        "plugins": [],
        "css": [],
        "modules": [],
        "layouts": {},
        "serverMiddleware": [],
        "ErrorPage": None,
        "loading": {
            "color": "black",
            "failedColor": "red",
            "height": "2px",
            "duration": 5000,
        },
        "transition": {
            "name": "page",
            "mode": "out-in",
        },
        "router": {
            "mode": "history",
            "base": "/",
            "routes": [],
            "middleware": [],
            "linkActiveClass": "stagecraft-link-active",
            "linkExactActiveClass": "stagecraft-link-exact-active",
            "extendRoutes": None,
            "scrollBehavior": None,
            "fallback": False,
        },
        "render": {
            "bundleRenderer": {},
            "resourceHints": True,
            "ssr": None,
            "http2": {
                "push": False,
            },
            "static": {},
            "gzip": {
                "threshold": 0,
            },
            "etag": {
                "weak": True,  # faster for responses > 5KB
            },
        },
        "watchers": {
            "webpack": {},
            "chokidar": {},
        },
    }


@lru_cache(maxsize=None)
def default_tree() -> Mapping[str, Any]:
    return freeze(_build_defaults())
