"""Tests for the function, complexity and dependency detectors."""

import pytest

from ts_analyzer.scanning.detectors import (
    complexity_score,
    extract_dependencies,
    extract_functions,
)
from ts_analyzer.scanning.normalizer import normalize


# ---------------------------------------------------------------------------
# Function / declaration detection
# ---------------------------------------------------------------------------


class TestExtractFunctions:
    def test_named_function(self):
        assert extract_functions("function hello() {}") == ("hello",)

    def test_arrow_with_parenthesized_params(self):
        assert "greet" in extract_functions("const greet = (name: string) => {}")

    def test_arrow_with_bare_param_and_async(self):
        names = extract_functions("let inc = x => x + 1;\nvar load = async () => fetch();")
        assert names == ("inc", "load")

    def test_class_declaration(self):
        assert extract_functions("class MyService {}") == ("MyService",)

    def test_exported_functions(self):
        names = extract_functions("export default function App() {}\nexport function util() {}")
        assert set(names) == {"App", "util"}

    def test_non_function_assignments_ignored(self):
        assert extract_functions('const x = 5; const y = "hello";') == ()

    def test_duplicate_names_counted_once(self):
        code = "function parse(a: string): void;\nfunction parse(a: any) {}\n"
        assert extract_functions(code) == ("parse",)

    def test_insertion_order_within_shape(self):
        code = "function b() {}\nfunction a() {}\nclass C {}"
        assert extract_functions(code) == ("b", "a", "C")

    def test_idempotent_and_order_independent_as_set(self):
        one = "function a() {}\nclass B {}\nconst c = () => 1;"
        two = "const c = () => 1;\nclass B {}\nfunction a() {}"
        assert set(extract_functions(one)) == set(extract_functions(two))
        assert extract_functions(one) == extract_functions(one)

    def test_declarations_in_comments_ignored_after_normalization(self):
        code = "// function ghost() {}\n/* class Phantom {} */\nfunction real() {}"
        assert extract_functions(normalize(code)) == ("real",)


# ---------------------------------------------------------------------------
# Complexity scoring
# ---------------------------------------------------------------------------


class TestComplexityScore:
    def test_baseline_is_one(self):
        assert complexity_score("const x = 1;") == 1
        assert complexity_score("") == 1

    def test_two_ifs(self):
        assert complexity_score("if (a) {} if (b) {}") == 3

    @pytest.mark.parametrize("n", [0, 1, 5, 12])
    def test_n_ifs(self, n):
        code = "\n".join(f"if (x{i}) {{ y(); }}" for i in range(n))
        assert complexity_score(normalize(code)) == 1 + n

    def test_for_of_plus_if(self):
        # for-of header + if
        assert complexity_score("for (const x of items) { if (x > 0) {} }") == 3

    def test_for_of_without_parens(self):
        assert complexity_score("for const x of items") == 2

    def test_else_if_counts_both_patterns(self):
        # "if (" twice plus "else if (" once
        assert complexity_score("if (a) {} else if (b) {}") == 4

    def test_loops_and_exceptions(self):
        code = "while (a) {} do { b(); } while (c); try {} catch (e) {}"
        # while x2, do, catch
        assert complexity_score(code) == 5

    def test_switch_cases(self):
        code = "switch (k) { case 1: break; case 2: break; default: break; }"
        assert complexity_score(code) == 3

    def test_logical_operators(self):
        assert complexity_score("const ok = a && b || c;") == 3

    def test_nullish_and_optional_chaining(self):
        assert complexity_score("const v = a ?? b;") == 2
        assert complexity_score("const v = a?.b;") == 2

    def test_ternary(self):
        assert complexity_score("const v = a ? b : c;") == 2

    def test_ternary_not_double_counted_with_nullish_or_chain(self):
        assert complexity_score("const v = a?.b ?? (c ? d : e);") == 4

    def test_comments_and_strings_do_not_count(self):
        code = "// if (a) {}\nconst s = 'while (x)';\nconst t = `for (;;) ${y}`;"
        assert complexity_score(normalize(code)) == 1

    def test_whitespace_invariant(self):
        assert complexity_score("if(a){}") == complexity_score("if   (a)   {   }")

    def test_monotonic_when_adding_decisions(self):
        base = "function f() { if (a) {} }"
        assert complexity_score(base + " if (b) {}") > complexity_score(base)


# ---------------------------------------------------------------------------
# Dependency extraction
# ---------------------------------------------------------------------------


class TestExtractDependencies:
    def test_excludes_react_keeps_others(self):
        deps = extract_dependencies(
            "import { useState } from 'react';\n"
            "import axios from 'axios';\n"
            "import { helper } from './utils';\n"
        )
        assert deps == ("./utils", "axios")

    def test_only_react(self):
        assert extract_dependencies("import React from 'react';") == ()

    def test_import_shapes(self):
        code = (
            'import * as path from "path";\n'
            "import type { Props } from './types';\n"
            "import Default, { named } from 'combo';\n"
            "import Def, * as ns from 'combo-ns';\n"
            "import './side-effect.css';\n"
            "import {\n  a,\n  b,\n} from '@scope/multi';\n"
        )
        assert extract_dependencies(code) == (
            "./side-effect.css",
            "./types",
            "@scope/multi",
            "combo",
            "combo-ns",
            "path",
        )

    def test_deduplicates_repeated_specifier(self):
        code = "import { a } from 'lodash';\nimport { b } from 'lodash';"
        assert extract_dependencies(code) == ("lodash",)

    def test_output_sorted(self):
        code = "import z from 'zeta';\nimport a from 'alpha';"
        assert extract_dependencies(code) == ("alpha", "zeta")

    def test_exclusion_is_case_sensitive(self):
        assert extract_dependencies("import R from 'React';") == ("React",)

    def test_full_framework_set_excluded(self):
        code = "\n".join(
            f"import x{i} from '{name}';"
            for i, name in enumerate(
                ["react", "react-dom", "react-redux", "react-router", "react-router-dom"]
            )
        )
        assert extract_dependencies(code) == ()

    def test_custom_exclusions(self):
        code = "import a from 'vue';\nimport b from 'react';"
        assert extract_dependencies(code, excluded={"vue"}) == ("react",)
        assert extract_dependencies(code, excluded=()) == ("react", "vue")
