# rimtrans/exceptions.py
"""
本模块定义了 RimTrans 项目中所有自定义的、语义化的异常类型。

文档加载、合并与导出的逐文件错误不会以异常形式向上传播，而是记录在
对应的 Document 或 ExportReport 上；这里的异常只用于真正需要中断调用方的场景。
"""


class RimTransError(Exception):
    """
    所有 RimTrans 自定义异常的通用基类。
    捕获此异常可以处理所有源自本项目的预期错误。
    """


class ConfigurationError(RimTransError):
    """
    表示在加载、解析或验证配置时发生的错误。
    例如，未知的目标语言，或提供商配置覆盖项格式不正确。
    """


class ProviderNotFoundError(RimTransError, KeyError):
    """
    表示尝试访问一个未注册的翻译提供商时引发的错误。
    继承自 KeyError 是为了保持与字典查找行为的一致性。
    """


class APIError(RimTransError):
    """
    表示与外部翻译服务 API 交互时发生的错误。
    只在适配器内部使用，编排器对外始终返回 ProviderResponse。
    """


class DocumentLoadError(RimTransError):
    """表示单个 XML 文档无法读取或解析。"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class ExportError(RimTransError):
    """表示导出操作的前置条件不满足（例如尚未加载任何文档）。"""
