"""
응답 변환

파싱된 JSON 응답을 모델 레코드로 변환.
변환 방식은 요청마다 한 번 Transformer(NONE | RECORD | FUNCTION)로 결정.
"""

from dataclasses import dataclass
from typing import Any, Callable

from core.errors import InvalidArgumentError, TransformError
from core.types import TransformKind


@dataclass(frozen=True)
class Transformer:
    """응답 변환 방식 (태그 + 대상)

    - NONE: 변환 없음
    - RECORD: 모델 클래스 (행 하나 또는 2차원 배열의 각 행을 생성자에 전달)
    - FUNCTION: data -> result 함수 (결과 그대로 사용)
    """

    kind: TransformKind
    target: Any = None

    @classmethod
    def none(cls) -> "Transformer":
        return cls(kind=TransformKind.NONE)

    @classmethod
    def record(cls, model: type) -> "Transformer":
        return cls(kind=TransformKind.RECORD, target=model)

    @classmethod
    def function(cls, fn: Callable[[Any], Any]) -> "Transformer":
        return cls(kind=TransformKind.FUNCTION, target=fn)

    @classmethod
    def resolve(cls, value: Any) -> "Transformer":
        """None / Transformer / 클래스 / 함수 -> Transformer

        Raises:
            InvalidArgumentError: 변환기로 쓸 수 없는 값
        """
        if value is None:
            return cls.none()
        if isinstance(value, Transformer):
            return value
        if isinstance(value, type):
            return cls.record(value)
        if callable(value):
            return cls.function(value)
        raise InvalidArgumentError(f"invalid transformer: {value!r}")


class ResponseTransformer:
    """응답 변환기

    Args:
        enabled: 클라이언트 transform 옵션. False면 모든 응답을 그대로 반환.
    """

    def __init__(self, enabled: bool):
        self.enabled = enabled

    def transform(self, data: Any, transformer: Transformer | None) -> Any:
        """응답 변환

        변환 중 발생한 예외는 TransformError로 감싸서 전파 (부분 결과 없음).
        """
        if not self.enabled or transformer is None:
            return data

        try:
            if transformer.kind == TransformKind.RECORD:
                return self.class_transform(data, transformer.target)
            if transformer.kind == TransformKind.FUNCTION:
                return transformer.target(data)
        except TransformError:
            raise
        except Exception as e:
            raise TransformError(str(e)) from e

        return data

    def class_transform(self, data: Any, model: type | None) -> Any:
        """배열 -> 모델 인스턴스

        - 비어있거나 falsy: []
        - 2차원 배열: 행마다 모델 인스턴스
        - 1차원 배열: 모델 인스턴스 하나
        """
        if not data:
            return []
        if model is None or not self.enabled:
            return data

        if isinstance(data, list) and isinstance(data[0], list):
            return [model(row) for row in data]

        return model(data)
