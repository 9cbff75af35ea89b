import os
import sys
from enum import Enum

from jinja2 import Environment, FileSystemLoader, Template

import config as cfg
import dotgraph
from . import doc_root_dir, template_dir

_usage = "Usage: generate.py [kind]"


def load_tmpl(tmpl: str) -> Template:
    env = Environment(loader=FileSystemLoader(template_dir()))
    env.filters["up_or_title"] = up_or_title
    return env.get_template(tmpl)


def up_or_title(kind: str) -> str:
    return cfg.TITLE_WORDS.get(kind, kind.title())


def _type_name(typ: type) -> str:
    if issubclass(typ, Enum):
        keywords = ", ".join(f"`{member.value}`" for member in typ)
        return f"{typ.__name__} ({keywords})"
    return typ.__name__


def gen_apidoc(kind: str) -> str:
    """Generate the attribute reference of one entity kind."""
    tmpl = load_tmpl(cfg.TMPL_APIDOC)

    attributes = getattr(dotgraph, cfg.KINDS[kind])
    slots = [
        {"attr": slot.attr, "name": slot.name, "types": [_type_name(t) for t in slot.types]}
        for slot in attributes.slots()
    ]
    return tmpl.render(kind=kind, slots=slots)


def make_apidoc(content: str) -> None:
    """Create an api documentation file"""
    os.makedirs(doc_root_dir(), exist_ok=True)
    doc_path = os.path.join(doc_root_dir(), cfg.FILE_APIDOC)
    with open(doc_path, "w+") as f:
        f.write(content)


def generate() -> None:
    """Generates the attribute reference of every entity kind."""
    make_apidoc("\n".join(gen_apidoc(kind) for kind in cfg.KINDS))


if __name__ == "__main__":
    if len(sys.argv) > 1:
        kind = sys.argv[1]
        if kind not in cfg.KINDS:
            sys.exit(_usage)
        print(gen_apidoc(kind))
    else:
        generate()
