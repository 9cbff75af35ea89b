# fmt: off

#########################
#      Application      #
#########################

APP_NAME = "dotgraph"

DIR_DOC_ROOT = "docs"
DIR_TEMPLATE = "templates"

# Entity kinds and the attributes class documenting each of them.
KINDS = {
    "graph": "GraphAttributes",
    "subgraph": "SubgraphAttributes",
    "node": "NodeAttributes",
    "edge": "EdgeAttributes",
}

#########################
#  Doc Auto Generation  #
#########################

TMPL_APIDOC = "apidoc.tmpl"

FILE_APIDOC = "attributes.md"

TITLE_WORDS = {
    "subgraph": "Subgraph and Cluster",
}

# fmt: on
