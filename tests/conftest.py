"""Shared pytest fixtures for GuideLint test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from guidelint.config.settings import GuideLintSettings
from guidelint.parsing.source_file import SourceFile

COMPLIANT_SOURCE = textwrap.dedent("""\
    import { formatPrice } from "./format_price.js";

    const maxRetries = 3;

    export const totalPrice = (items, taxRate) => {
      if (!items.length) return 0;

      const subtotal = items.reduce((sum, item) => sum + item.price, 0);
      return formatPrice(subtotal * (1 + taxRate));
    };

    export const loadConfig = async (reader) => {
      let raw;
      try {
        raw = await reader.read();
      } catch (error) {
        throw new Error(`config unreadable: ${error.message}`);
      }

      return JSON.parse(raw);
    };
""")

LEGACY_SOURCE = textwrap.dedent("""\
    const helpers = require("./helpers");

    function load_user(id, retries = 3) {
      // load the user
      const user = helpers.loadUser(id);
      return user || {};
    }
""")

NESTED_SOURCE = textwrap.dedent("""\
    const handle = (request) => {
      if (request.user) {
        if (request.user.active) {
          if (request.body) {
            save(request.body);
          }
        }
      }
    };
""")


def make_source(text: str, path: str = "sample.js") -> SourceFile:
    return SourceFile(path=path, text=text)


@pytest.fixture
def js_project(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    src.mkdir()
    (src / "cart_total.js").write_text(COMPLIANT_SOURCE)
    (src / "legacyLoader.js").write_text(LEGACY_SOURCE)
    (src / "readme.md").write_text("# not a source file\n")
    vendored = tmp_path / "node_modules" / "pkg"
    vendored.mkdir(parents=True)
    (vendored / "index.js").write_text("function vendored() {}\n")
    return tmp_path


@pytest.fixture
def clean_project(tmp_path: Path) -> Path:
    src = tmp_path / "src"
    src.mkdir()
    (src / "cart_total.js").write_text(COMPLIANT_SOURCE)
    return tmp_path


@pytest.fixture
def default_settings() -> GuideLintSettings:
    return GuideLintSettings()
