"""
core/exceptions.py - 통합 예외 계층 구조

플러그인 전체에서 사용되는 예외 클래스들을 정의합니다.
메트릭 단위 실패는 fetcher에서 잡아 로그만 남기고, 세션 생성 실패만
프로세스 종료로 이어집니다.

예외 계층 구조:
    MetricsPluginError (베이스)
    ├── SessionError (세션/클라이언트 생성 실패 - 치명적)
    ├── APICallError (CloudWatch 호출 실패)
    ├── MetricFetchError (응답 해석 실패)
    │   ├── NoDatapointsError
    │   └── MalformedResponseError
    └── ValidationError (입력 검증)

Usage:
    from core.exceptions import APICallError

    try:
        response = cloudwatch.get_metric_statistics(...)
    except ClientError as e:
        raise APICallError.from_client_error("cloudwatch", "get_metric_statistics", e) from e
"""

from typing import Any, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class MetricsPluginError(Exception):
    """플러그인 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


# =============================================================================
# 세션 / API 호출 관련 예외
# =============================================================================


class SessionError(MetricsPluginError):
    """세션 생성/관리 관련 예외"""

    def __init__(
        self,
        identifier: str,  # profile_name 또는 "static-credentials"
        region: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"세션 오류 [{identifier}/{region}]: {message}"
        super().__init__(full_message, cause)
        self.identifier = identifier
        self.region = region


class APICallError(MetricsPluginError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError, BotoCoreError를 래핑합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message

    def __str__(self) -> str:
        # ClientError 메시지는 이미 message에 포함됨
        if self.error_code or self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "APICallError":
        """botocore.exceptions.ClientError로부터 생성

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 예외

        Returns:
            APICallError 인스턴스
        """
        error_code = None
        error_message = None

        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


# =============================================================================
# 메트릭 조회 결과 관련 예외
# =============================================================================


class MetricFetchError(MetricsPluginError):
    """메트릭 응답 처리 관련 예외"""

    def __init__(
        self,
        metric: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause)
        self.metric = metric


class NoDatapointsError(MetricFetchError):
    """조회 구간에 datapoint가 없는 경우

    CloudWatch 집계 지연으로 흔히 발생하는 정상 상황입니다.
    """

    def __init__(self, metric: str, message: str = "fetched no datapoints"):
        super().__init__(metric, message)


class MalformedResponseError(MetricFetchError):
    """요청한 통계 값이 datapoint에 없는 경우"""

    def __init__(self, metric: str, statistic: str, cause: Optional[Exception] = None):
        super().__init__(metric, f"datapoint has no '{statistic}' value", cause)
        self.statistic = statistic


# =============================================================================
# 입력 검증 관련 예외
# =============================================================================


class ValidationError(MetricsPluginError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
