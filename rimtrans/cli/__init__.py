# rimtrans/cli/__init__.py
"""RimTrans CLI 模块入口。"""

from rimtrans.cli.main import app

__all__ = ["app"]
