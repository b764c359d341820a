# easyfts/query/__init__.py
from easyfts.query.nodes import Conjunction, Internal, Node, Terminal, TermForm
from easyfts.query.normalizer import normalize
from easyfts.query.parser import parse
from easyfts.query.renderer import render
from easyfts.query.scanner import Scanner

__all__ = [
    "Node",
    "Terminal",
    "Internal",
    "TermForm",
    "Conjunction",
    "Scanner",
    "parse",
    "normalize",
    "render",
]
