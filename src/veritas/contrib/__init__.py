"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-16
@Docs: Optional integrations for veritas.
veritas 可选集成。
"""
