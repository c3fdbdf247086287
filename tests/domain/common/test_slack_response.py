"""Tests for SlackResponse envelope and decode_response"""

import pytest

from domain.common.exceptions import SlackDecodeError, SlackErrorResponse
from domain.common.slack_response import (
    UNKNOWN_ERROR,
    ResponseMetadata,
    SlackResponse,
    decode_response,
)
from domain.team.responses import LoginResponse, TeamResponse


class TestSlackResponseErr:
    """SlackResponse.err() 测试"""

    def test_ok_response_has_no_error(self):
        """测试 ok=true 时没有错误"""
        response = SlackResponse(ok=True)

        assert response.err() is None
        response.raise_for_error()

    def test_failed_response_returns_error(self):
        """测试 ok=false 时返回 SlackErrorResponse"""
        response = SlackResponse(ok=False, error="invalid_auth")

        error = response.err()

        assert isinstance(error, SlackErrorResponse)
        assert error.error == "invalid_auth"
        assert str(error) == "invalid_auth"

    def test_error_includes_metadata_messages(self):
        """测试错误包含 response_metadata 中的消息"""
        response = SlackResponse(
            ok=False,
            error="invalid_arguments",
            response_metadata=ResponseMetadata(
                messages=["[ERROR] missing required field: team_id"],
                warnings=["superfluous_charset"],
            ),
        )

        with pytest.raises(SlackErrorResponse) as exc_info:
            response.raise_for_error()

        assert exc_info.value.messages == ["[ERROR] missing required field: team_id"]
        assert exc_info.value.warnings == ["superfluous_charset"]
        assert "missing required field" in str(exc_info.value)


class TestDecodeResponse:
    """decode_response() 测试"""

    def test_decode_success(self):
        """测试成功解码并返回响应"""
        response = decode_response(
            {"ok": True, "team": {"id": "T1", "name": "Acme"}}, TeamResponse
        )

        assert response.ok is True
        assert response.team.id == "T1"
        assert response.team.name == "Acme"

    def test_decode_ignores_unknown_fields(self):
        """测试忽略未定义的字段"""
        response = decode_response(
            {"ok": True, "team": {"id": "T1", "is_verified": True}, "extra": 1},
            TeamResponse,
        )

        assert response.team.id == "T1"

    def test_failed_envelope_raises_even_with_payload(self):
        """测试 ok=false 时即使有载荷也抛出错误"""
        with pytest.raises(SlackErrorResponse) as exc_info:
            decode_response(
                {"ok": False, "error": "team_not_found", "team": {"id": "T1"}},
                TeamResponse,
            )

        assert exc_info.value.error == "team_not_found"

    def test_missing_ok_is_failure(self):
        """测试缺少 ok 字段视为失败，错误码为 unknown_error"""
        with pytest.raises(SlackErrorResponse) as exc_info:
            decode_response({"team": {"id": "T1"}}, TeamResponse)

        assert exc_info.value.error == UNKNOWN_ERROR
        assert str(exc_info.value) == "unknown_error"

    def test_blank_error_uses_unknown_error(self):
        """测试 ok=false 且 error 为空时使用 unknown_error"""
        error = SlackResponse(ok=False, error="").err()

        assert error.error == "unknown_error"

    @pytest.mark.parametrize("ok", ["yes", "true", 1, "1"])
    def test_non_bool_ok_raises_decode_error(self, ok):
        """测试 ok 不是布尔值时抛出 SlackDecodeError 而不是视为成功"""
        with pytest.raises(SlackDecodeError):
            decode_response({"ok": ok, "team": {"id": "T1"}}, TeamResponse)

    def test_negative_paging_does_not_mask_api_error(self):
        """测试载荷中的负数分页不会掩盖远端报告的错误"""
        with pytest.raises(SlackErrorResponse) as exc_info:
            decode_response(
                {"ok": False, "error": "X", "paging": {"total": -1}},
                LoginResponse,
            )

        assert exc_info.value.error == "X"

    def test_negative_paging_decoded_on_success(self):
        """测试成功响应中的负数分页按原值返回"""
        response = decode_response(
            {"ok": True, "paging": {"page": -1}}, LoginResponse
        )

        assert response.paging.page == -1

    def test_type_mismatch_raises_decode_error(self):
        """测试字段类型不符时抛出 SlackDecodeError"""
        with pytest.raises(SlackDecodeError):
            decode_response({"ok": True, "team": "not-an-object"}, TeamResponse)

    def test_non_object_raises_decode_error(self):
        """测试非对象数据抛出 SlackDecodeError"""
        with pytest.raises(SlackDecodeError):
            decode_response(["ok"], TeamResponse)

    def test_null_metadata_decodes_as_empty(self):
        """测试 response_metadata 为 null 时按空值处理"""
        response = decode_response(
            {"ok": True, "response_metadata": None}, SlackResponse
        )

        assert response.response_metadata == ResponseMetadata()
        assert response.response_metadata.cursor == ""

    def test_cursor_reads_next_cursor(self):
        """测试 cursor 读取 next_cursor 字段"""
        response = decode_response(
            {"ok": True, "response_metadata": {"next_cursor": "dGVhbTpDMDYx"}},
            SlackResponse,
        )

        assert response.response_metadata.cursor == "dGVhbTpDMDYx"
