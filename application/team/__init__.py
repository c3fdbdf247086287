"""
Team 应用层

提供 team.* Web API 的调用服务。
"""
