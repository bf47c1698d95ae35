from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Callable
from pathlib import Path

from .catalog import default_catalog, filter_recipes
from .config import CONFIG_FILENAME, EXPORT_FORMATS, EffectiveConfig, config_to_toml, resolve_config
from .content import load_recipe_content
from .domain import slug_to_identifier
from .errors import (
    CadencebookError,
    CatalogError,
    ConfigError,
    InvalidSlugError,
    MissingFileError,
)
from .export import descriptor_to_dict, export_catalog
from .paths import resolve_content_root, resolve_recipe_paths
from .templates import render_recipe_module, scaffold_recipe, write_template_file
from .validate import check_catalog, check_recipe


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "list": _cmd_list,
        "show": _cmd_show,
        "paths": _cmd_paths,
        "check": _cmd_check,
        "export": _cmd_export,
        "new-recipe": _cmd_new_recipe,
        "init": _cmd_init,
        "config": _cmd_config,
    }

    handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except CadencebookError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)
    except FileExistsError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except Exception as exc:  # pragma: no cover
        print(str(exc), file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cadencebook", parents=[_common_options(None)])
    # subcommand copies must not clobber options given before the subcommand
    common = _common_options(argparse.SUPPRESS)
    sub = parser.add_subparsers(dest="command")

    listing = sub.add_parser("list", parents=[common])
    listing.add_argument("--author")
    listing.add_argument("--query")
    listing.add_argument("--json", action="store_true")

    show = sub.add_parser("show", parents=[common])
    show.add_argument("slug")
    show.add_argument("--json", action="store_true")
    show.add_argument("--content", action="store_true", help="Include the referenced file contents")

    paths = sub.add_parser("paths", parents=[common])
    paths.add_argument("slug")

    check = sub.add_parser("check", parents=[common])
    check.add_argument("slug", nargs="?")

    export = sub.add_parser("export", parents=[common])
    export.add_argument("--format", dest="export_format", choices=EXPORT_FORMATS)
    export.add_argument("--output")

    new_recipe = sub.add_parser("new-recipe", parents=[common])
    new_recipe.add_argument("slug")
    new_recipe.add_argument("--title", required=True)
    new_recipe.add_argument("--author", default="Flow Blockchain")
    new_recipe.add_argument("--playground-link", dest="playground_link", default="")
    new_recipe.add_argument("--excerpt", default="")

    init = sub.add_parser("init")
    init.add_argument("path", nargs="?", default=".")
    init.add_argument("--force", action="store_true")

    sub.add_parser("config", parents=[common])

    return parser


def _common_options(default: object) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--content-root", dest="content_root", default=default)
    common.add_argument("--project", default=default)
    return common

def _cmd_list(args: argparse.Namespace) -> int:
    recipes = filter_recipes(default_catalog(), author=args.author, query=args.query)
    if args.json:
        print(json.dumps([descriptor_to_dict(r) for r in recipes], indent=2))
    else:
        for rec in recipes:
            print(f"{rec.slug}: {rec.title}")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    recipe = default_catalog().get(args.slug)
    data = descriptor_to_dict(recipe)
    if args.content:
        cfg = _resolve_cfg(args)
        content = load_recipe_content(recipe, resolve_content_root(cfg))
        data["content"] = {
            "smartContractCode": content.smart_contract_code,
            "smartContractExplanation": content.smart_contract_explanation,
            "transactionCode": content.transaction_code,
            "transactionExplanation": content.transaction_explanation,
        }
    if args.json:
        print(json.dumps(data, indent=2))
    else:
        for key, value in data.items():
            print(f"{key}: {value}")
    return 0


def _cmd_paths(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    recipe = default_catalog().get(args.slug)
    paths = resolve_recipe_paths(recipe, resolve_content_root(cfg))
    for path in paths.files():
        print(path)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    root = resolve_content_root(cfg)
    catalog = default_catalog()
    if args.slug:
        check_recipe(catalog.get(args.slug), root)
        print(f"{args.slug}: ok")
        return 0

    problems = check_catalog(catalog, root)
    if not problems:
        print(f"{len(catalog)} recipe(s) ok")
        return 0
    for slug, missing in problems.items():
        for path in missing:
            print(f"{slug}: missing {path}", file=sys.stderr)
    raise MissingFileError(f"{len(problems)} recipe(s) incomplete")


def _cmd_export(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    text = export_catalog(default_catalog().recipes(), cfg.export_format)
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        print(args.output)
    else:
        sys.stdout.write(text)
    return 0


def _cmd_new_recipe(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    content = render_recipe_module(
        args.slug,
        args.title,
        author=args.author,
        playground_link=args.playground_link,
        excerpt=args.excerpt,
    )
    content_root = resolve_content_root(cfg)
    filename = f"{slug_to_identifier(args.slug)}.py"
    for target in (Path(os.getcwd()) / filename, content_root / args.slug):
        if target.exists():
            raise FileExistsError(f"File already exists: {target}")

    written = scaffold_recipe(args.slug, content_root)
    written_module = write_template_file(content, filename, os.getcwd())
    for path in written:
        print(path)
    print(written_module)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    root = os.path.abspath(args.path)
    os.makedirs(root, exist_ok=True)
    os.makedirs(os.path.join(root, "recipes"), exist_ok=True)
    config_path = os.path.join(root, CONFIG_FILENAME)
    if os.path.exists(config_path) and not args.force:
        raise ConfigError(f"{config_path} already exists (use --force to overwrite)")
    with open(config_path, "w", encoding="utf-8") as fh:
        fh.write("""content_root = \"recipes\"\n# export_format = \"json\"\n""")
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg))
    return 0


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    return resolve_config(_cli_args_dict(args))


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: CadencebookError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, MissingFileError):
        return 3
    if isinstance(exc, InvalidSlugError):
        return 4
    if isinstance(exc, CatalogError):
        return 5
    return 1
