"""Shared test fixtures for ts-analyzer tests."""

import os
from pathlib import Path

import pytest

SAMPLE_TS = """
import { something } from './module';
import React from 'react';

function processData(items: string[]) {
  for (const item of items) {
    if (item.length > 0) {
      console.log(item);
    }
  }
}

const helper = (x: number) => x * 2;

class DataService {
  fetch() { return []; }
}

export default processData;
"""


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Keep user/project TOML files and TS_ANALYZER_* vars out of tests."""
    home = tmp_path / "_home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)
    for key in list(os.environ):
        if key.startswith("TS_ANALYZER_"):
            monkeypatch.delenv(key)


@pytest.fixture
def write_file(tmp_path):
    """Write a file under tmp_path/project and return its path."""
    root = tmp_path / "project"

    def _write(name: str, content, encoding: str = "utf-8") -> Path:
        p = root / name
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            p.write_bytes(content)
        else:
            p.write_text(content, encoding=encoding)
        return p

    return _write


@pytest.fixture
def sample_project(write_file, tmp_path):
    """A small project: two identical files, one unrelated, plus ignored noise."""
    write_file("src/a/foo.ts", "export const x = 1;\n")
    write_file("src/b/foo.ts", "export const x = 1;\n")
    write_file("src/app.tsx", SAMPLE_TS)
    write_file("src/types.d.ts", "declare const y: number;\n")
    write_file("src/app.test.ts", "if (a) {}\n")
    write_file("node_modules/lib/index.ts", "export function lib() {}\n")
    write_file("dist/out.ts", "export function built() {}\n")
    write_file("README.md", "# not typescript\n")
    return tmp_path / "project"


@pytest.fixture
def sample_ts():
    """TypeScript source with imports, a loop, a branch and three declarations."""
    return SAMPLE_TS
