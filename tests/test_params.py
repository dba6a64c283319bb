"""Tests for signpost.routing.params — parameter declarations and reordering."""

import pytest

from signpost.errors import ConfigurationError, MissingParameterError
from signpost.routing.params import (
    REQUIRED,
    Param,
    declare_params,
    order_params,
    signature_params,
)


class TestParam:
    def test_required_by_default(self) -> None:
        assert Param("id").required is True
        assert Param("id").default is REQUIRED

    def test_optional(self) -> None:
        assert Param("page", default=1).required is False

    def test_none_default_is_optional(self) -> None:
        assert Param("page", default=None).required is False


class TestDeclareParams:
    def test_strings_and_params(self) -> None:
        assert declare_params(["name", Param("id", default="0")]) == (
            Param("name"),
            Param("id", default="0"),
        )

    def test_empty(self) -> None:
        assert declare_params([]) == ()

    @pytest.mark.parametrize("item", ["", 3, Param("")])
    def test_invalid(self, item: object) -> None:
        with pytest.raises(ConfigurationError):
            declare_params([item])  # type: ignore[list-item]


class TestSignatureParams:
    def test_positional(self) -> None:
        def handler(name, id):
            return None

        assert [p.name for p in signature_params(handler)] == ["name", "id"]
        assert all(p.required for p in signature_params(handler))

    def test_defaults(self) -> None:
        def handler(id, page=1):
            return None

        params = signature_params(handler)
        assert params[1].default == 1

    def test_keyword_only(self) -> None:
        def handler(id, *, fmt="html"):
            return None

        params = signature_params(handler)
        assert params[1].keyword_only is True

    def test_var_args_ignored(self) -> None:
        def handler(id, *args, **kwargs):
            return None

        assert [p.name for p in signature_params(handler)] == ["id"]

    def test_bound_method_excludes_self(self) -> None:
        class Controller:
            def show(self, id):
                return None

        assert [p.name for p in signature_params(Controller().show)] == ["id"]

    def test_int_annotation_converts(self) -> None:
        def handler(id: int, name: str):
            return None

        id_param, name_param = signature_params(handler)
        assert id_param.convert is int
        assert name_param.convert is None


class TestOrderParams:
    def test_reorders_to_declaration(self) -> None:
        declared = (Param("name"), Param("id"))
        args, kwargs = order_params(declared, {"id": "42", "name": "alice"})
        assert args == ["alice", "42"]
        assert kwargs == {}

    def test_extra_captures_dropped(self) -> None:
        args, _ = order_params((Param("id"),), {"id": "1", "slug": "x"})
        assert args == ["1"]

    def test_missing_required(self) -> None:
        with pytest.raises(MissingParameterError) as exc_info:
            order_params((Param("x"), Param("y")), {"x": "1"})
        assert exc_info.value.param == "y"
        assert exc_info.value.available == ("x",)
        assert "'y'" in str(exc_info.value)
        assert "x" in str(exc_info.value)

    def test_missing_with_no_captures(self) -> None:
        with pytest.raises(MissingParameterError, match="none"):
            order_params((Param("id"),), {})

    def test_optional_gets_default(self) -> None:
        args, _ = order_params((Param("id"), Param("page", default=1)), {"id": "3"})
        assert args == ["3", 1]

    def test_capture_overrides_default(self) -> None:
        args, _ = order_params((Param("page", default=1),), {"page": "5"})
        assert args == ["5"]

    def test_keyword_only_goes_to_kwargs(self) -> None:
        declared = (Param("id"), Param("fmt", default="html", keyword_only=True))
        args, kwargs = order_params(declared, {"id": "1", "fmt": "json"})
        assert args == ["1"]
        assert kwargs == {"fmt": "json"}

    def test_conversion(self) -> None:
        args, _ = order_params((Param("id", convert=int),), {"id": "42"})
        assert args == [42]

    def test_failed_conversion_keeps_string(self) -> None:
        args, _ = order_params((Param("id", convert=int),), {"id": "abc"})
        assert args == ["abc"]
