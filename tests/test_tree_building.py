"""Tests for directory structure rendering and path handling utilities."""

import io
import os
import random

import pytest
from packfiles.core.models import FileRecord
from packfiles.utils import PathUtils, TreeRenderer


def _records(root, rel_paths):
    return [FileRecord(path=os.path.join(root, p), size=0, content="") for p in rel_paths]


class TestPathUtils:
    """Test path splitting and naming utilities."""

    def test_relative_parts_nested(self):
        assert PathUtils.relative_parts("/repo/src/utils/helper.go", "/repo") == ["src", "utils", "helper.go"]

    def test_relative_parts_top_level(self):
        assert PathUtils.relative_parts("/repo/README.md", "/repo") == ["README.md"]

    def test_relative_parts_relative_root(self):
        assert PathUtils.relative_parts(os.path.join(".", "docs", "a.md"), ".") == ["docs", "a.md"]

    def test_join_path_components(self):
        assert PathUtils.join_path_components(["src", "utils"]) == os.path.join("src", "utils")
        assert PathUtils.join_path_components([]) == ""

    def test_root_name(self):
        assert PathUtils.root_name("/tmp/project") == "project"
        assert PathUtils.root_name("/tmp/project/") == "project"

    def test_root_name_current_directory(self):
        assert PathUtils.root_name(".") == os.path.basename(os.getcwd())


class TestTreeRenderer:
    """Test rendering of the flat record list."""

    @pytest.fixture
    def renderer(self):
        return TreeRenderer("/repo")

    def test_flat_files(self, renderer):
        output = renderer.render_to_string(_records("/repo", ["b.md", "a.go"]))
        assert output == (
            "Directory structure:\n"
            "└── repo/\n"
            "    ├── a.go\n"
            "    ├── b.md\n"
        )

    def test_nested_directories(self, renderer):
        paths = ["src/main.go", "src/utils/helper.go", "README.md"]
        output = renderer.render_to_string(_records("/repo", paths))
        assert output == (
            "Directory structure:\n"
            "└── repo/\n"
            "    ├── README.md\n"
            "    ├── src/\n"
            "    │   ├── main.go\n"
            "    │   ├── utils/\n"
            "    │   │   ├── helper.go\n"
        )

    def test_directory_emitted_once(self, renderer):
        paths = ["a/b.go", "a/c/d.go", "a/e.go", "a/c/f.go"]
        output = renderer.render_to_string(_records("/repo", paths))
        lines = output.splitlines()

        assert lines.count("    ├── a/") == 1
        assert lines.count("    │   ├── c/") == 1
        # title + root + 2 dirs + 4 files
        assert len(lines) == 8

    def test_file_sorts_before_same_named_directory(self, renderer):
        output = renderer.render_to_string(_records("/repo", ["a/b.go", "a.go"]))
        assert output.splitlines()[2:] == [
            "    ├── a.go",
            "    ├── a/",
            "    │   ├── b.go",
        ]

    def test_uppercase_sorts_first(self, renderer):
        output = renderer.render_to_string(_records("/repo", ["readme.md", "README.md", "Zeta.md"]))
        assert output.splitlines()[2:] == [
            "    ├── README.md",
            "    ├── Zeta.md",
            "    ├── readme.md",
        ]

    def test_permutations_render_identically(self, renderer):
        paths = ["x/y/z.go", "a.md", "x/a.go", "m/n.md", "x/y/a.md", "b.go"]
        expected = renderer.render_to_string(_records("/repo", paths))

        rng = random.Random(42)
        for _ in range(5):
            shuffled = list(paths)
            rng.shuffle(shuffled)
            assert renderer.render_to_string(_records("/repo", shuffled)) == expected

    def test_sorts_records_in_place(self, renderer):
        records = _records("/repo", ["b.md", "a.go"])
        renderer.render(records, io.StringIO())
        assert [r.path for r in records] == ["/repo/a.go", "/repo/b.md"]

    def test_empty_list(self, renderer):
        assert renderer.render_to_string([]) == "Directory structure:\n└── repo/\n"

    def test_one_line_per_file_and_directory(self, renderer):
        paths = ["a/b/c.go", "a/b/d.go", "a/e.md", "f.md"]
        lines = renderer.render_to_string(_records("/repo", paths)).splitlines()[2:]

        dir_lines = [line for line in lines if line.endswith("/")]
        file_lines = [line for line in lines if not line.endswith("/")]
        assert len(dir_lines) == 2  # a/, a/b/
        assert len(file_lines) == len(paths)

    def test_write_to_stream(self, renderer):
        out = io.StringIO()
        result = renderer.render(_records("/repo", ["a.go"]), out)
        assert result is None
        assert out.getvalue().startswith("Directory structure:\n")

    def test_sample_repo(self, sample_repo):
        from packfiles.core.models import Config
        from packfiles.core.walker import DirectoryWalker

        config = Config(root_dir=str(sample_repo), include_extensions=["md", "go", "mbt"],
                        exclude_extensions=["html", "css"])
        records = DirectoryWalker(config).walk()
        output = TreeRenderer(str(sample_repo)).render_to_string(records)

        assert output == (
            "Directory structure:\n"
            "└── sample_repo/\n"
            "    ├── LICENSE.MD\n"
            "    ├── README.md\n"
            "    ├── core/\n"
            "    │   ├── lib.mbt\n"
            "    ├── docs/\n"
            "    │   ├── guide.md\n"
            "    ├── main.go\n"
            "    ├── pkg/\n"
            "    │   ├── util/\n"
            "    │   │   ├── util.go\n"
            "    │   │   ├── util_test.go\n"
        )
