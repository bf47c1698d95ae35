from __future__ import annotations

from datetime import date
from pathlib import Path

from .domain import build_recipe_paths, slug_to_identifier, validate_slug


CONTRACT_PLACEHOLDER = "// Contract for {slug}\n"
TRANSACTION_PLACEHOLDER = "// Transaction for {slug}\n\ntransaction {{\n    prepare(acct: AuthAccount) {{}}\n\n    execute {{}}\n}}\n"
EXPLANATION_PLACEHOLDER = "Explain the {kind} for {slug} here.\n"


def render_recipe_module(
    slug: str,
    title: str,
    author: str = "Flow Blockchain",
    playground_link: str = "",
    excerpt: str = "",
    created_at: date | None = None,
) -> str:
    identifier = slug_to_identifier(slug)
    created = created_at or date.today()
    lines = [
        "from __future__ import annotations",
        "",
        "from datetime import date",
        "",
        "from cadencebook.domain import RecipeDescriptor",
        "",
        "",
        f"RECIPE = {slug!r}",
        "",
        f"{identifier.upper()} = RecipeDescriptor(",
        "    slug=RECIPE,",
        f"    title={title!r},",
        f"    created_at=date({created.year}, {created.month}, {created.day}),",
        f"    author={author!r},",
        f"    playground_link={playground_link!r},",
        f"    excerpt={excerpt!r},",
        ")",
    ]
    return "\n".join(lines) + "\n"


def render_recipe_files(slug: str) -> dict[str, str]:
    validate_slug(slug)
    paths = build_recipe_paths(slug)
    return {
        paths["smart_contract_code"]: CONTRACT_PLACEHOLDER.format(slug=slug),
        paths["smart_contract_explanation"]: EXPLANATION_PLACEHOLDER.format(kind="contract", slug=slug),
        paths["transaction_code"]: TRANSACTION_PLACEHOLDER.format(slug=slug),
        paths["transaction_explanation"]: EXPLANATION_PLACEHOLDER.format(kind="transaction", slug=slug),
    }


def scaffold_recipe(slug: str, content_root: Path) -> list[Path]:
    files = render_recipe_files(slug)
    recipe_dir = Path(content_root) / slug
    if recipe_dir.exists():
        raise FileExistsError(f"Recipe directory already exists: {recipe_dir}")

    written: list[Path] = []
    for rel, content in files.items():
        path = Path(content_root) / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        written.append(path)
    return written


def write_template_file(content: str, filename: str, cwd: str) -> str:
    path = Path(cwd) / filename
    if path.exists():
        raise FileExistsError(f"File already exists: {path}")
    path.write_text(content, encoding="utf-8")
    return str(path)
