"""公共工具"""
