"""Tests for team query parameter encoding"""

import pytest

from application.queries.team import (
    DEFAULT_LOGINS_COUNT,
    DEFAULT_LOGINS_PAGE,
    AccessLogParameters,
    BillableInfoParameters,
    ExternalTeamsParameters,
)


class TestAccessLogParameters:
    """AccessLogParameters 编码测试"""

    def test_defaults_are_omitted(self):
        """测试默认 count/page 不写入表单"""
        values = {}
        AccessLogParameters().to_values(values)

        assert values == {}

    def test_explicit_default_values_are_omitted(self):
        """测试显式传入默认值也不写入表单"""
        values = {}
        AccessLogParameters(
            count=DEFAULT_LOGINS_COUNT, page=DEFAULT_LOGINS_PAGE
        ).to_values(values)

        assert "count" not in values
        assert "page" not in values

    def test_none_values_are_omitted(self):
        """测试 None 不写入表单"""
        values = {}
        AccessLogParameters(team_id=None, count=None, page=None).to_values(values)

        assert values == {}

    @pytest.mark.parametrize("count, page", [(50, 2), (0, 0), (1000, 99)])
    def test_non_default_values_are_stringified(self, count, page):
        """测试非默认值以字符串写入"""
        values = {}
        AccessLogParameters(count=count, page=page).to_values(values)

        assert values["count"] == [str(count)]
        assert values["page"] == [str(page)]

    def test_team_id_written_when_not_empty(self):
        """测试 team_id 非空时写入"""
        values = {}
        AccessLogParameters(team_id="T123").to_values(values)

        assert values == {"team_id": ["T123"]}

    def test_empty_team_id_omitted(self):
        """测试空 team_id 不写入"""
        values = {}
        AccessLogParameters(team_id="").to_values(values)

        assert values == {}


class TestBillableInfoParameters:
    """BillableInfoParameters 编码测试"""

    def test_empty_parameters_write_nothing(self):
        """测试空参数不写入任何字段"""
        values = {}
        BillableInfoParameters().to_values(values)

        assert values == {}

    def test_team_and_user_written(self):
        """测试 team_id 和 user 写入"""
        values = {}
        BillableInfoParameters(user="U1", team_id="T1").to_values(values)

        assert values == {"team_id": ["T1"], "user": ["U1"]}


class TestExternalTeamsParameters:
    """ExternalTeamsParameters 编码测试"""

    def test_all_fields_written(self):
        """测试所有非空字段写入"""
        values = {}
        ExternalTeamsParameters(
            connection_status_filter="connected",
            cursor="abc",
            limit=20,
            slack_connect_pref_filter=["approved_orgs_only"],
            sort_direction="asc",
            sort_field="team_name",
            workspace_filter=["T1"],
        ).to_values(values)

        assert values == {
            "connection_status_filter": ["connected"],
            "cursor": ["abc"],
            "limit": ["20"],
            "slack_connect_pref_filter": ["approved_orgs_only"],
            "sort_direction": ["asc"],
            "sort_field": ["team_name"],
            "workspace_filter": ["T1"],
        }

    def test_zero_limit_omitted(self):
        """测试 limit=0 不写入"""
        values = {}
        ExternalTeamsParameters(limit=0).to_values(values)

        assert values == {}

    def test_list_filters_send_only_first_element(self):
        """测试列表过滤条件只提交第一个元素"""
        values = {}
        ExternalTeamsParameters(
            slack_connect_pref_filter=["approved_orgs_only", "allow_sc_file_uploads"],
            workspace_filter=["T1", "T2"],
        ).to_values(values)

        assert values["slack_connect_pref_filter"] == ["approved_orgs_only"]
        assert values["workspace_filter"] == ["T1"]

    def test_encoding_does_not_mutate_parameters(self):
        """测试编码不修改参数对象"""
        params = ExternalTeamsParameters(workspace_filter=["T1", "T2"])
        params.to_values({})

        assert params.workspace_filter == ["T1", "T2"]
