#!/usr/bin/env python3

import argparse
import os
import shutil
import sys
import tempfile
import zipfile
from pathlib import Path

from colorama import init, Fore, Style

init(autoreset=True)

TICK = Fore.GREEN + "[OK]" + Style.RESET_ALL
CROSS = Fore.RED + "[FAIL]" + Style.RESET_ALL

REPO_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_FUNCTIONS_DIR = REPO_ROOT / "functions"
DEFAULT_PACKAGE_DIR = REPO_ROOT / "cloud_utils"
DEFAULT_ZIP_DIR = Path(__file__).resolve().parent / "zips"

SKIP_DIRS = {"__pycache__", ".pytest_cache"}
SKIP_SUFFIXES = {".pyc", ".pyo"}


def _skipped(path):
    return path.name in SKIP_DIRS or path.suffix in SKIP_SUFFIXES


def process_directory(src_dir, dest_dir):
    processed_files = []

    for item in sorted(src_dir.iterdir()):
        if _skipped(item):
            continue
        if item.is_file():
            dest_file = dest_dir / item.name
            shutil.copy2(item, dest_file)
            processed_files.append(dest_file)
        elif item.is_dir():
            new_subdir = dest_dir / item.name
            new_subdir.mkdir(exist_ok=True)
            processed_files.extend(process_directory(item, new_subdir))

    return processed_files


def create_zip_archive(source_dir, zip_path):
    with zipfile.ZipFile(zip_path, 'w', zipfile.ZIP_DEFLATED) as zipf:
        for root, dirs, files in os.walk(source_dir):
            dirs.sort()
            for file in sorted(files):
                file_path = os.path.join(root, file)
                arcname = os.path.relpath(file_path, source_dir)
                zipf.write(file_path, arcname)

    return zip_path


def build_function(func_dir, zip_dir, package_dir=DEFAULT_PACKAGE_DIR):
    """Zips one function directory with the cloud_utils package next to index.py."""
    func_dir = Path(func_dir)
    zip_dir = Path(zip_dir)
    if not (func_dir / "index.py").is_file():
        raise FileNotFoundError(f"{func_dir} has no index.py")
    zip_dir.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory() as temp_dir:
        work_dir = Path(temp_dir) / "cloud_function"
        work_dir.mkdir()
        process_directory(func_dir, work_dir)
        init_file = work_dir / "__init__.py"
        if init_file.exists():
            init_file.unlink()
        package_dest = work_dir / Path(package_dir).name
        package_dest.mkdir()
        process_directory(Path(package_dir), package_dest)
        return create_zip_archive(work_dir, zip_dir / f"{func_dir.name}.zip")


def find_functions(functions_dir):
    return [p for p in sorted(Path(functions_dir).iterdir()) if p.is_dir() and (p / "index.py").is_file()]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Bundle cloud functions with cloud_utils into zip archives")
    parser.add_argument("functions", nargs="*", help="function directories (default: every folder under functions/)")
    parser.add_argument("--out", default=str(DEFAULT_ZIP_DIR), help="output directory for archives")
    args = parser.parse_args(argv)

    targets = [Path(f) for f in args.functions] or find_functions(DEFAULT_FUNCTIONS_DIR)
    if not targets:
        print(f"{CROSS} Функции не найдены")
        return 1

    print(f"\n{Style.BRIGHT}Сборка функций...")
    built = 0
    for func_dir in targets:
        print(f"  {func_dir.name}...", end=" ")
        try:
            zip_path = build_function(func_dir, args.out)
        except (OSError, zipfile.BadZipFile) as e:
            print(f"{CROSS} {e}")
            continue
        print(f"{TICK} {zip_path.stat().st_size} байт")
        built += 1

    print(f"\nГотово: {built} архивов")
    print(f"Папка: {args.out}")
    return 0 if built == len(targets) else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(f"\n{CROSS} Отменено")
        sys.exit(130)
