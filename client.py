"""
Slack Team API 客户端示例

使用示例：
    SLACK_TOKEN=xoxb-... python client.py
"""

from application.queries.team import AccessLogParameters
from common.logging import setup_logging
from domain.common.exceptions import SlackErrorResponse
from infrastructure.config.settings import get_settings
from infrastructure.containers import ApplicationContainer


def main():
    settings = get_settings()
    setup_logging(settings.effective_log_level, settings.log_file or None)

    container = ApplicationContainer()
    service = container.app.team_api_service()

    try:
        # 1. 团队信息
        print("\n=== 团队信息 ===")
        team = service.get_team_info()
        print(f"{team.name} ({team.id}) - {team.domain}.slack.com")

        # 2. 团队资料字段
        print("\n=== 资料字段 ===")
        profile = service.get_team_profile()
        for profile_field in profile.fields:
            print(f"[{profile_field.ordering}] {profile_field.label} ({profile_field.type})")

        # 3. 访问日志第一页
        print("\n=== 访问日志 ===")
        logins, paging = service.get_access_logs(AccessLogParameters(count=20))
        for login in logins:
            print(f"{login.username} {login.ip} {login.country} x{login.count}")
        print(f"第 {paging.page}/{paging.pages} 页，共 {paging.total} 条")

        # 4. 计费状态
        print("\n=== 计费状态 ===")
        billable = service.get_billable_info()
        active = sum(1 for info in billable.values() if info.billing_active)
        print(f"计费用户: {active}/{len(billable)}")
    except SlackErrorResponse as e:
        print(f"API 错误: {e.error}")
    finally:
        container.infra.slack_transport().close()


if __name__ == "__main__":
    main()
