import json
import subprocess
from pathlib import Path
from unittest import mock

from rustdrill.project import Crate, RustAnalyzerProject


def test_crate_to_dict_defaults():
    assert Crate("exercises/a.rs").to_dict() == {
        "root_module": "exercises/a.rs",
        "edition": "2021",
        "deps": [],
        "cfg": ["test"],
    }


def test_path_to_json_only_rust_files():
    project = RustAnalyzerProject()
    project.path_to_json(Path("exercises/intro/intro1.rs"))
    project.path_to_json(Path("exercises/intro/README.md"))
    project.path_to_json(Path("exercises/intro"))
    assert [c.root_module for c in project.crates] == [str(Path("exercises/intro/intro1.rs"))]


def test_exercises_to_json(tmp_path):
    root = tmp_path / "exercises"
    (root / "intro").mkdir(parents=True)
    (root / "vecs").mkdir()
    (root / "intro" / "intro1.rs").write_text("fn main() {}")
    (root / "vecs" / "vecs1.rs").write_text("fn main() {}")
    (root / "vecs" / "README.md").write_text("notes")
    project = RustAnalyzerProject()
    project.exercises_to_json(root)
    modules = [Path(c.root_module) for c in project.crates]
    assert modules == [root / "intro" / "intro1.rs", root / "vecs" / "vecs1.rs"]


def test_exercises_to_json_empty(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "missing")
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="src", crates=[Crate("a.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    assert json.loads(target.read_text()) == project.to_dict()


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/somewhere/library")
    project = RustAnalyzerProject()
    with mock.patch("rustdrill.project.subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/somewhere/library"
    assert run.call_count == 0


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    done = subprocess.CompletedProcess([], 0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with mock.patch("rustdrill.project.subprocess.run", return_value=done) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert Path(project.sysroot_src) == Path("/opt/toolchain/lib/rustlib/src/rust/library")
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out