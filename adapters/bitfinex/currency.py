"""
통화 설정 병합

/conf 엔드포인트의 통화 설정 6개 배열을 하나의 통화 목록으로 병합.

입력 순서 (고정):
    [상장 통화, 심볼 매핑, 라벨 매핑, 풀 매핑, 익스플로러 매핑, 지갑 FX 매핑]

출력 행:
    [key, 이름, 풀 | None, 익스플로러 목록 | [], 심볼 | key, 지갑 FX | []]
"""

from typing import Any


CURRENCY_CONF_KEYS = (
    "pub:list:currency",
    "pub:map:currency:sym",
    "pub:map:currency:label",
    "pub:map:currency:pool",
    "pub:map:currency:explorer",
    "pub:map:currency:wfx",
)


def currency_conf_keys(company: str = "") -> list[str]:
    """통화 설정 키 목록 (company가 있으면 ':<company>' 접미사)"""
    suffix = f":{company}" if company else ""
    return [f"{key}{suffix}" for key in CURRENCY_CONF_KEYS]


def arr_to_dict(entries: list[Any]) -> dict[Any, Any]:
    """설정 배열 -> 딕셔너리

    - 스칼라 항목: 자기 자신에 매핑 ("BTC" -> "BTC")
    - [key, value] 항목: key -> value
    - 길이 1 이하 배열 항목: 무시
    """
    result: dict[Any, Any] = {}
    for entry in entries:
        if not isinstance(entry, list):
            result[entry] = entry
        elif len(entry) > 1:
            result[entry[0]] = entry[1]
    return result


def gen_currency_list(data: Any) -> Any:
    """통화 설정 6개 배열 병합

    길이 6 배열이 아니면 그대로 반환.
    출력 순서는 (상장 -> 심볼 -> 라벨) 합집합의 삽입 순서이며 정렬하지 않음.

    풀 익스플로러 상속: 자체 익스플로러가 없는 풀 항목은 풀 대상의 익스플로러를
    복사. 한 번만 적용하며 연쇄되지 않음.
    """
    if not isinstance(data, list) or len(data) != 6:
        return data

    listed = arr_to_dict(data[0])
    symbols = arr_to_dict(data[1])
    labels = arr_to_dict(data[2])
    pool = arr_to_dict(data[3])
    explorer = arr_to_dict(data[4])
    wallet_fx = arr_to_dict(data[5])

    # 나중 소스가 우선 (라벨 > 심볼 > 상장)
    all_currencies = {**listed, **symbols, **labels}

    # 풀 익스플로러 상속 (단일 패스: 이번 패스에서 복사된 값은 다시 전파하지 않음)
    inherited = {}
    for key, pool_key in pool.items():
        if not explorer.get(key) and explorer.get(pool_key):
            inherited[key] = explorer[pool_key]
    explorer.update(inherited)

    return [
        [
            key,
            name,
            pool.get(key) or None,
            explorer.get(key) or [],
            symbols.get(key) or key,
            wallet_fx.get(key) or [],
        ]
        for key, name in all_currencies.items()
    ]
