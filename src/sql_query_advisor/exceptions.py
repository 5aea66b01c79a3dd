class QueryAdvisorError(Exception):
    pass


class InvalidQueryError(QueryAdvisorError, TypeError):
    def __init__(self, received: object) -> None:
        self.received_type = type(received).__name__
        super().__init__(f"SQL query must be a string, got {self.received_type}")


class DuplicateRuleError(QueryAdvisorError, ValueError):
    def __init__(self, rule_id: str) -> None:
        super().__init__(f"Rule already registered: {rule_id}")
        self.rule_id = rule_id


class UnknownRuleError(QueryAdvisorError, KeyError):
    def __init__(self, rule_id: str) -> None:
        super().__init__(f"No rule registered with id: {rule_id}")
        self.rule_id = rule_id
