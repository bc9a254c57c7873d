"""Tests for client-side validation script generation."""

import logging
from datetime import date

import pytest

from formview.constraints.types import (
    ConstraintDescriptor,
    StaticConstraintSource,
    ValidatorRuleType,
)
from formview.exceptions import MissingRequiredAttribute, ValidationTargetNotFound
from formview.script.generator import (
    ConstraintScriptGenerator,
    packaged_fragment,
    resolve_type_name,
)
from formview.script.model import PLACEHOLDER_MESSAGE, ConstantParam, FieldRule, RangeParam
from formview.script.renderer import accessor_source, field_arguments, js_literal


def c(prop, kind, **params):
    return ConstraintDescriptor(prop, kind, params)


@pytest.fixture
def book_constraints():
    return {
        "title": [c("title", "nullable", value=False), c("title", "maxSize", value=100)],
        "isbn": [c("isbn", "blank", value=False), c("isbn", "matches", regex="[0-9-]+")],
        "pages": [c("pages", "range", **{"from": 1, "to": 5000})],
        "notes": [c("notes", "unique", value=True)],
    }


@pytest.fixture
def source(book_constraints):
    return StaticConstraintSource({"Book": book_constraints})


@pytest.fixture
def generator(source):
    return ConstraintScriptGenerator(source)


# =============================================================================
# Script model
# =============================================================================


class TestBuild:
    def test_functions_in_first_appearance_order(self, generator, book_constraints):
        script = generator.build("book", book_constraints)
        assert script.function_names == [
            "book_required",
            "book_maxLength",
            "book_mask",
            "book_intRange",
        ]

    def test_property_appears_once_per_rule(self, generator, book_constraints):
        script = generator.build("book", book_constraints)
        required = script.function_for(ValidatorRuleType.REQUIRED)
        assert [r.property_name for r in required.rules] == ["title", "isbn"]

    def test_parameters(self, generator, book_constraints):
        script = generator.build("book", book_constraints)
        assert script.function_for(ValidatorRuleType.MAX_LENGTH).rules[0].param == ConstantParam(100)
        assert script.function_for(ValidatorRuleType.MASK).rules[0].param == ConstantParam("[0-9-]+")
        assert script.function_for(ValidatorRuleType.INT_RANGE).rules[0].param == RangeParam(1, 5000)
        assert script.function_for(ValidatorRuleType.REQUIRED).rules[0].param is None

    def test_placeholder_message(self, generator, book_constraints):
        script = generator.build("book", book_constraints)
        assert all(
            rule.message == PLACEHOLDER_MESSAGE for f in script.functions for rule in f.rules
        )

    def test_unmapped_kinds_dropped(self, generator, book_constraints, caplog):
        with caplog.at_level(logging.DEBUG, logger="formview.script.generator"):
            script = generator.build("book", book_constraints)
        assert not any(f.has_property("notes") for f in script.functions)
        assert "unique" in caplog.text

    def test_length_produces_two_rules(self, generator):
        script = generator.build("book", {"summary": [c("summary", "length", min=10, max=500)]})
        assert script.rule_types == [ValidatorRuleType.MAX_LENGTH, ValidatorRuleType.MIN_LENGTH]
        assert script.functions[0].rules[0].param == ConstantParam(500)
        assert script.functions[1].rules[0].param == ConstantParam(10)

    def test_float_range(self, generator):
        script = generator.build("book", {"rating": [c("rating", "range", **{"from": 0.5, "to": 5})]})
        assert script.function_names == ["book_floatRange"]

    def test_fragments_attached(self, generator, book_constraints):
        script = generator.build("book", book_constraints)
        required = script.function_for(ValidatorRuleType.REQUIRED)
        assert "function validateRequired(form)" in required.fragment

    def test_fragments_disabled(self, source, book_constraints):
        script = ConstraintScriptGenerator(source, fragments=None).build("book", book_constraints)
        assert all(f.fragment is None for f in script.functions)

    def test_missing_form(self, generator, book_constraints):
        with pytest.raises(MissingRequiredAttribute):
            generator.build("", book_constraints)


class TestPackagedFragments:
    @pytest.mark.parametrize("rule_type", list(ValidatorRuleType))
    def test_every_rule_type_has_a_fragment(self, rule_type):
        fragment = packaged_fragment(rule_type)
        assert fragment is not None
        assert f"function validate{rule_type.capitalized}(form)" in fragment


# =============================================================================
# Rendering
# =============================================================================


class TestAccessors:
    def test_constant(self):
        rule = FieldRule("title", param=ConstantParam(100))
        assert accessor_source(rule) == "function() { return 100; }"

    def test_regex_is_quoted(self):
        rule = FieldRule("isbn", param=ConstantParam('[0-9]"\\d'))
        assert accessor_source(rule) == 'function() { return "[0-9]\\"\\\\d"; }'

    def test_range(self):
        rule = FieldRule("pages", param=RangeParam(1, 5000))
        assert accessor_source(rule) == (
            "function() { if (arguments[0] == 'min') return 1; else return 5000; }"
        )

    def test_js_literal_escapes_closing_tags(self):
        assert js_literal("</script>") == '"<\\/script>"'
        assert js_literal(date(2020, 1, 1)) == '"2020-01-01"'

    def test_no_param(self):
        assert accessor_source(FieldRule("title")) is None

    def test_field_arguments(self):
        rule = FieldRule("title", param=ConstantParam(100))
        assert field_arguments(rule, "book") == (
            'document.forms["book"].elements["title"], "Test message", '
            "function() { return 100; }"
        )


class TestGenerate:
    def test_script_block(self, generator):
        script = generator.generate("book")
        assert script.startswith('<script type="text/javascript">')
        assert script.rstrip().endswith("</script>")

    def test_function_bodies(self, generator):
        script = generator.generate("book")
        assert "function book_required() {" in script
        assert (
            '    this["title"] = new Array(document.forms["book"].elements["title"], "Test message");'
            in script
        )
        assert "function book_maxLength() {" in script
        assert "function() { return 100; }" in script

    def test_validate_form(self, generator):
        script = generator.generate("book")
        checks = [line.strip() for line in script.splitlines() if line.strip().startswith("if (!validate")]
        assert checks == [
            "if (!validateRequired(form)) return false;",
            "if (!validateMaxLength(form)) return false;",
            "if (!validateMask(form)) return false;",
            "if (!validateIntRange(form)) return false;",
        ]
        assert "return true;" in script

    def test_fragment_emitted_before_function(self, generator):
        script = generator.generate("book")
        assert script.index("function validateRequired(form)") < script.index("function book_required()")

    def test_against(self, generator):
        script = generator.generate("bookForm", against="Book")
        assert "function bookForm_required() {" in script
        assert 'document.forms["bookForm"]' in script

    def test_missing_form(self, generator):
        with pytest.raises(MissingRequiredAttribute, match=r"Tag \[validate\]"):
            generator.generate(None)

    def test_unknown_type(self, generator):
        with pytest.raises(ValidationTargetNotFound) as exc_info:
            generator.generate("author")
        assert exc_info.value.type_name == "Author"

    def test_closing_tag_in_regex_is_escaped(self):
        source = StaticConstraintSource({"Book": {"code": [c("code", "matches", regex="a</script><b>")]}})
        script = ConstraintScriptGenerator(source).generate("book")
        assert script.count("</script>") == 1
        assert 'function() { return "a<\\/script><b>"; }' in script

    def test_date_range_bounds_are_emitted_as_strings(self):
        bounds = {"from": date(2020, 1, 1), "to": date(2021, 1, 1)}
        source = StaticConstraintSource({"Book": {"published": [c("published", "range", **bounds)]}})
        script = ConstraintScriptGenerator(source).generate("book")
        assert "function book_floatRange() {" in script
        assert 'return "2020-01-01"; else return "2021-01-01";' in script

    def test_type_without_constraints(self):
        generator = ConstraintScriptGenerator(StaticConstraintSource({"Book": {}}))
        with pytest.raises(ValidationTargetNotFound):
            generator.generate("book")


class TestResolveTypeName:
    def test_capitalizes_form(self):
        assert resolve_type_name("book") == "Book"
        assert resolve_type_name("bookForm") == "BookForm"

    def test_against_wins(self):
        assert resolve_type_name("edit", "Book") == "Book"
