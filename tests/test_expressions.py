"""Tests for template expression building."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tagbind.config import BindingConfig
from tagbind.expressions import ExpressionBuilder, effective_category, render_expression
from tagbind.formats import FormatResolver
from tagbind.types import DataTypeCategory, LocalePattern, PropertyDescriptor, RenderOptions


# =============================================================================
# ExpressionBuilder Tests
# =============================================================================


class TestExpressionBuilder:
    """Test ExpressionBuilder.build."""

    def test_plain_without_pipe(self):
        descriptor = PropertyDescriptor("total")
        assert ExpressionBuilder().build(descriptor) == "total"

    def test_plain_with_pipe(self):
        descriptor = PropertyDescriptor("total", DataTypeCategory.PLAIN)
        options = RenderOptions(pipe_spec="currency")
        assert ExpressionBuilder().build(descriptor, options) == "total|currency"

    def test_plain_with_empty_pipe(self):
        options = RenderOptions(pipe_spec="")
        assert ExpressionBuilder().build(PropertyDescriptor("total"), options) == "total"

    def test_plain_ignores_resolved_format(self):
        result = ExpressionBuilder().build(PropertyDescriptor("total"), None, "MM/DD/YYYY")
        assert result == "total"

    def test_temporal_ignores_pipe(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        options = RenderOptions(pipe_spec="currency")
        result = ExpressionBuilder().build(descriptor, options, "MM/DD/YYYY")
        assert result == "{{ moment(orderDate).format('MM/DD/YYYY') }}"

    @pytest.mark.parametrize(
        "category",
        [DataTypeCategory.DATE, DataTypeCategory.DATETIME, DataTypeCategory.TIME],
    )
    def test_temporal_categories_use_formatter(self, category):
        descriptor = PropertyDescriptor("stamp", category)
        result = ExpressionBuilder().build(descriptor, None, "X")
        assert result == "{{ moment(stamp).format('X') }}"

    def test_custom_format_wins(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        options = RenderOptions(custom_format="YYYY-MM-DDTHH:mm")
        result = ExpressionBuilder().build(descriptor, options, "MM/DD/YYYY")
        assert result == "{{ moment(orderDate).format('YYYY-MM-DDTHH:mm') }}"

    def test_no_format_uses_formatter_default(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        assert ExpressionBuilder().build(descriptor) == "{{ moment(orderDate).format() }}"

    def test_parent_and_var_alias(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        options = RenderOptions(parent_alias="order", var_alias="placed")
        result = ExpressionBuilder().build(descriptor, options, "DD.MM.YYYY")
        assert result == "{{ moment(order.placed).format('DD.MM.YYYY') }}"

    def test_explicit_binding_path(self):
        descriptor = PropertyDescriptor("total", binding_path="vm.invoice.total")
        options = RenderOptions(parent_alias="ignored", pipe_spec="number:'1.2-2'")
        assert ExpressionBuilder().build(descriptor, options) == "vm.invoice.total|number:'1.2-2'"

    def test_custom_formatter_and_delimiters(self):
        builder = ExpressionBuilder(formatter="dayjs", open_delimiter="{{", close_delimiter="}}")
        descriptor = PropertyDescriptor("due", DataTypeCategory.DATE)
        assert builder.build(descriptor, None, "DD/MM/YYYY") == "{{dayjs(due).format('DD/MM/YYYY')}}"

    def test_unrecognized_category_is_plain(self):
        descriptor = PropertyDescriptor("amount", "Currency")
        assert descriptor.data_type is DataTypeCategory.PLAIN
        options = RenderOptions(pipe_spec="currency")
        assert ExpressionBuilder().build(descriptor, options, "MM/DD/YYYY") == "amount|currency"

    def test_override_category(self):
        descriptor = PropertyDescriptor("createdAt", DataTypeCategory.DATETIME)
        options = RenderOptions(data_type_override=DataTypeCategory.TIME)
        assert effective_category(descriptor, options) is DataTypeCategory.TIME


# =============================================================================
# render_expression Tests
# =============================================================================


class TestRenderExpression:
    """Test the render_expression facade."""

    def test_datetime_default_locale(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATETIME)
        result = render_expression(descriptor, RenderOptions())
        assert result == "{{ moment(orderDate).format('MM/DD/YYYY H:MM A') }}"

    def test_plain_with_pipe(self):
        descriptor = PropertyDescriptor("total", DataTypeCategory.PLAIN)
        assert render_expression(descriptor, RenderOptions(pipe_spec="currency")) == "total|currency"

    def test_locale_by_name(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        assert render_expression(descriptor, locale="de-DE") == "{{ moment(orderDate).format('DD.MM.YYYY') }}"

    def test_locale_pattern_instance(self):
        descriptor = PropertyDescriptor("startsAt", DataTypeCategory.TIME)
        locale = LocalePattern("custom", "d/M/yyyy", "h:mm:ss tt")
        assert render_expression(descriptor, locale=locale) == "{{ moment(startsAt).format('H:MM A') }}"

    def test_locale_override_wins(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        options = RenderOptions(locale_override="ja-JP")
        result = render_expression(descriptor, options, locale="de-DE")
        assert result == "{{ moment(orderDate).format('YYYY/MM/DD') }}"

    def test_unknown_locale_falls_back_to_config_default(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        config = BindingConfig(default_locale="en-GB")
        result = render_expression(descriptor, locale="xx-YY", config=config)
        assert result == "{{ moment(orderDate).format('DD/MM/YYYY') }}"

    def test_custom_format_bypasses_resolver(self):
        resolver = MagicMock(spec=FormatResolver)
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        options = RenderOptions(custom_format="[Q]Q YYYY")

        result = render_expression(descriptor, options, resolver=resolver)

        assert result == "{{ moment(orderDate).format('[Q]Q YYYY') }}"
        resolver.resolve.assert_not_called()

    def test_plain_never_resolves(self):
        resolver = MagicMock(spec=FormatResolver)
        render_expression(PropertyDescriptor("total"), resolver=resolver)
        resolver.resolve.assert_not_called()

    def test_config_formatter(self):
        descriptor = PropertyDescriptor("orderDate", DataTypeCategory.DATE)
        config = BindingConfig(formatter="dayjs")
        result = render_expression(descriptor, locale="en-US", config=config)
        assert result == "{{ dayjs(orderDate).format('MM/DD/YYYY') }}"
