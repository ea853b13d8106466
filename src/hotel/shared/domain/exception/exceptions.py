class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルール（入力値の妥当性を含む）に違反した場合"""

    pass


class PermissionDeniedException(DomainException):
    """操作に必要な権限を持たない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    pass
