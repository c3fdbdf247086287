"""
领域层公共模块

提供值对象基类、异常体系和 Slack 响应信封。
"""
