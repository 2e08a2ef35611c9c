"""
End-to-end tests for the generator facade and the command-line interface.
"""

import os

import pytest

from helpers import create_test_project
from vue_component_graph import GraphOptions, OutputFormat, generate_ascii_tree, generate_html_tree
from vue_component_graph.main import main, parse_args

FILES = {
    "src/App.vue": """
<template>
  <div id="app">
    <Header />
    <Footer />
  </div>
</template>
    """,
    "src/components/Header.vue": "<template><header><nav-menu /></header></template>",
    "src/components/Footer.vue": "<template><footer /></template>",
    "src/components/NavMenu.vue": "<template><ul /></template>",
    "node_modules/lib/Footer.vue": "<template><Vendor /></template>",
}


class TestGenerator:
    """Library-level generation."""

    def test_ascii_tree(self):
        with create_test_project(FILES) as root:
            options = GraphOptions(root=root, targets=[root / "src/App.vue"])

            assert generate_ascii_tree(options) == "\n".join([
                "App.vue",
                "├── Header.vue",
                "│   └── NavMenu.vue",
                "└── Footer.vue",
            ])

    def test_ascii_trees_for_several_targets(self):
        with create_test_project(FILES) as root:
            options = GraphOptions(
                root=root,
                targets=[root / "src/App.vue", root / "src/components/Header.vue"],
            )
            output = generate_ascii_tree(options)

            assert output.endswith("Header.vue\n└── NavMenu.vue")
            assert output.count("NavMenu.vue") == 2

    def test_html_tree(self):
        with create_test_project(FILES) as root:
            options = GraphOptions(root=root, targets=[root / "src/App.vue"], output=OutputFormat.HTML)
            document = generate_html_tree(options)

            assert '<span class="label">NavMenu.vue</span>' in document
            assert "Vendor" not in document

    def test_missing_root_raises(self):
        with create_test_project({}) as root:
            options = GraphOptions(root=root / "nope", targets=[root / "App.vue"])
            with pytest.raises(OSError):
                generate_ascii_tree(options)


class TestCli:
    """Command-line behavior."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        args = parse_args(["App.vue"])

        assert args.targets == ["App.vue"]
        assert args.output == "ascii"
        assert args.root == os.getcwd()
        assert args.verbose is False

    def test_requires_a_target(self):
        with pytest.raises(SystemExit):
            parse_args([])

    def test_rejects_unknown_output(self):
        with pytest.raises(SystemExit):
            parse_args(["-o", "svg", "App.vue"])

    def test_ascii_output(self, capsys):
        with create_test_project(FILES) as root:
            main(["-r", str(root), str(root / "src/App.vue")])

        out = capsys.readouterr().out
        assert out == "App.vue\n├── Header.vue\n│   └── NavMenu.vue\n└── Footer.vue\n"

    def test_html_output_with_multiple_targets(self, capsys):
        with create_test_project(FILES) as root:
            main([
                "--root", str(root),
                "--output", "html",
                str(root / "src/App.vue"),
                str(root / "src/components/Footer.vue"),
            ])

        out = capsys.readouterr().out
        assert out.count("<!DOCTYPE html>") == 1
        assert out.count('<ul class="tree-root">') == 2

    def test_root_defaults_to_working_directory(self, capsys, monkeypatch):
        with create_test_project(FILES) as root:
            monkeypatch.chdir(root / "src")
            main(["App.vue"])

        assert "NavMenu.vue" in capsys.readouterr().out

    def test_unlistable_root_exits_non_zero(self, capsys):
        with create_test_project({}) as root:
            with pytest.raises(SystemExit) as exc_info:
                main(["-r", str(root / "missing"), "App.vue"])

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
