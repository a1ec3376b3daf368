class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class NotFoundError(DomainException):
    """フライト・予約が見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class CapacityError(BusinessRuleViolationException):
    """座席クラスが存在しない、または残席が不足している場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（同一IDでの登録時）"""

    pass
