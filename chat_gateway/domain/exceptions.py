"""统一业务异常模型。

所有跨模块抛出的业务级错误都应该继承自 BusinessError，
由网关控制器在唯一的出口处捕获，并压平成统一的 Failure 响应。
"""


class BusinessError(Exception):
    """业务异常基类。

    Attributes:
        code: 机器可读错误码（如 "MISSING_CREDENTIAL"）。
        message: 用户可读错误信息。
        extra: 其他补充字段（例如 provider、status_code、payload 等）。
    """

    def __init__(self, code: str, message: str, **extra):
        self.code = code
        self.message = message
        self.extra = extra
        super().__init__(message)


class MissingCredentialError(BusinessError):
    """所选 Provider 需要密钥但未配置。"""


class BackendError(BusinessError):
    """Provider 可达，但返回了非 2xx 状态或无法解析的响应体。"""


class TransportError(BusinessError):
    """网络层错误，例如 DNS 失败、连接失败、超时等。"""


class UnknownProviderError(BusinessError):
    """解析出的 Provider 名称不在支持列表内。"""


class MalformedRequestError(BusinessError):
    """入站请求体无法解析或缺少 message。"""
