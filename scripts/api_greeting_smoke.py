# api_greeting_smoke.py -- smoke run against a deployed greeting function
import json
import os
import sys
import uuid
from typing import Any, Optional

import requests
from colorama import Fore, Style, init

init(autoreset=True)

BASE_URL = os.getenv("GREETING_API_URL", "https://tbd-greeting.apigw.yandexcloud.net").rstrip("/")
EXPECTED_ORIGIN = os.getenv("EXPECTED_CORS_ORIGIN", "*")
DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "X-Correlation-Id": str(uuid.uuid4()),
}

TICK = Fore.GREEN + "✔" + Style.RESET_ALL
CROSS = Fore.RED + "✖" + Style.RESET_ALL


def _pretty(data: Any) -> str:
    if data is None:
        return "<empty>"
    try:
        return json.dumps(data, ensure_ascii=False, indent=2)
    except (TypeError, ValueError):
        return str(data)


def _safe_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def run_step(title: str, raw_body: Optional[str], expected_status: int) -> Optional[requests.Response]:
    url = f"{BASE_URL}/greeting"
    print(f"{Style.BRIGHT}→ {title}{Style.RESET_ALL}")
    print(Fore.BLUE + f"   POST {url}")
    print(Fore.BLUE + f"   body = {raw_body if raw_body is not None else '<empty>'}")
    try:
        response = requests.post(url, data=raw_body.encode("utf-8") if raw_body is not None else None, headers=DEFAULT_HEADERS, timeout=20)
    except requests.RequestException as exc:
        print(f"   {CROSS} сеть недоступна: {exc}")
        return None

    if response.status_code != expected_status:
        print(f"   {CROSS} ожидали {expected_status}, получили {response.status_code}")
        print(Fore.RED + f"   тело = {_pretty(_safe_json(response))}")
        return None

    print(f"   {TICK} ответ {response.status_code}")
    print(Fore.GREEN + f"   тело = {_pretty(_safe_json(response))}")
    return response


def ensure_cors(response: Optional[requests.Response]) -> None:
    if response is None:
        sys.exit(f"{CROSS} критическая ошибка: шаг завершился неуспешно")
    origin = response.headers.get("Access-Control-Allow-Origin")
    if origin != EXPECTED_ORIGIN:
        sys.exit(f"{CROSS} ожидали Access-Control-Allow-Origin={EXPECTED_ORIGIN}, получили {origin}")


def ensure_text(response: Optional[requests.Response], expected: str) -> None:
    if response is None or response.text != expected:
        sys.exit(f"{CROSS} ожидали тело '{expected}', получили {response.text if response is not None else None!r}")


if __name__ == "__main__":
    print("\n--- Проверяем greeting-функцию ---")
    print(Fore.YELLOW + f"   BASE_URL = {BASE_URL}\n")

    # Step 1: корректный JSON
    step1 = run_step("Приветствие", json.dumps({"name": "Smoke"}), expected_status=200)
    ensure_cors(step1)
    greeting = (_safe_json(step1) or {}).get("greeting", "")
    if "Smoke" not in greeting:
        sys.exit(f"{CROSS} в приветствии нет имени: {greeting!r}")

    # Step 2: пустое тело
    step2 = run_step("Пустой body (ожидаем 400)", None, expected_status=400)
    ensure_cors(step2)
    ensure_text(step2, "No input supplied for JSON parsing")

    # Step 3: тело не JSON
    step3 = run_step("Невалидный JSON (ожидаем 400)", "not json", expected_status=400)
    ensure_text(step3, "Input could not be parsed as JSON")

    # Step 4: нет поля name
    step4 = run_step("Без поля name (ожидаем 422)", json.dumps({"nom": "x"}), expected_status=422)
    ensure_cors(step4)

    print(f"\n{TICK} smoke-сценарии завершены успешно")
