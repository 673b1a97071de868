"""``pagecraft resolve`` and ``pagecraft variables``."""

from __future__ import annotations

import argparse

from ...templating import get_all_variable_paths, resolve_template
from ..loading import load_context, load_json


def cmd_resolve(args: argparse.Namespace) -> int:
    context = load_context(args.context)
    print(resolve_template(args.template, context))
    return 0


def cmd_variables(args: argparse.Namespace) -> int:
    for path in get_all_variable_paths(load_json(args.file)):
        print(path)
    return 0


__all__ = ["cmd_resolve", "cmd_variables"]
