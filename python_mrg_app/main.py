#!/usr/bin/env python3
"""
MRG Random - Console Version
Консольное приложение для генерации случайных чисел генератором MRG(4)
"""
import sys
import argparse
import os
import time
from datetime import datetime
from concurrent.futures import ProcessPoolExecutor, as_completed

import numpy as np

# Добавляем путь к модулям
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from constants import SEED_TABLE
from generator import Generator
from settings import Settings
from enums import Distribution
from results import SamplingResult, SamplingConfig, SeedStreamResult
from sample_stats import compute_sample_statistics


def draw_samples(generator, distribution, count):
    """Draw `count` values from the generator into a float64 array."""
    if distribution == Distribution.NORMAL:
        draw = generator.random_normal
    else:
        draw = generator.random_uniform
    return np.fromiter((draw() for _ in range(count)), dtype=np.float64, count=count)


def process_seed(seed_key, params, distribution, count, keep_samples=True):
    """Draw one sample stream from a freshly seeded generator.

    The generator is created inside this call, so each worker process owns
    its instance exclusively. All arguments are pickle-able for
    ProcessPoolExecutor.

    Args:
        seed_key: Seed table key (1..24)
        params: dict with mean, std_dev, uniform_low, uniform_high
        distribution: Distribution enum
        count: Number of samples to draw
        keep_samples: Store the raw samples in the result

    Returns:
        SeedStreamResult
    """
    generator = Generator(seed_key, **params)
    samples = draw_samples(generator, distribution, count)
    statistics = compute_sample_statistics(samples, distribution, params)

    return SeedStreamResult(
        seed_key=generator.seed_key,
        distribution=distribution.name.lower(),
        statistics=statistics,
        step_count=generator.step_count,
        samples=samples.tolist() if keep_samples else [],
    )


def _print_stream_summary(stream):
    stats = stream.statistics
    print(f"\nКлюч: {stream.seed_key}")
    print("-" * 60)
    print(f"  Количество: {stats.count} (шагов рекурсии: {stream.step_count})")
    print(f"  Среднее: {stats.mean:.6f}")
    print(f"  СКО: {stats.std:.6f}")
    print(f"  Мин/Макс: {stats.min:.6f} / {stats.max:.6f}")
    if stream.distribution == 'uniform':
        print(f"  Вне диапазона: {stats.out_of_range}")
    if stats.ks_statistic is not None:
        print(f"  KS: D={stats.ks_statistic:.6f}, p={stats.ks_pvalue:.4f}")
    else:
        print("  KS: не вычисляется (вырожденные параметры)")
    if stats.lag1_correlation is not None:
        print(f"  Автокорреляция (лаг 1): {stats.lag1_correlation:.6f}")


def run_sampling(settings, seed_keys, threads=1, keep_samples=True):
    """Draw one stream per seed key and return structured results.

    Args:
        settings: Sampling settings
        seed_keys: Seed keys to draw from; None entries are auto-seeded
        threads: Worker processes (1 = run in this process)
        keep_samples: Store the raw samples in the result

    Returns:
        SamplingResult with one SeedStreamResult per seed key
    """
    start_time = time.time()

    params = settings.get_generator_params()
    distribution = settings.get_distribution()
    count = settings.get_samples_cnt()

    streams = []

    print("Генерация последовательностей...")
    print("-" * 60)

    if threads > 1 and len(seed_keys) > 1:
        with ProcessPoolExecutor(max_workers=threads) as executor:
            futures = {
                executor.submit(
                    process_seed, seed_key, params, distribution, count, keep_samples
                ): seed_key
                for seed_key in seed_keys
            }

            for future in as_completed(futures):
                try:
                    streams.append(future.result())
                except Exception as e:
                    print(f"\nОшибка при обработке ключа {futures[future]}: {e}")
    else:
        for seed_key in seed_keys:
            streams.append(process_seed(seed_key, params, distribution, count, keep_samples))

    streams.sort(key=lambda s: s.seed_key)

    for stream in streams:
        _print_stream_summary(stream)

    print()
    print("=" * 60)
    print("Обработка завершена успешно!")

    elapsed = time.time() - start_time

    config = SamplingConfig(
        distribution=settings.get_distribution_name(),
        count=count,
        mean=params['mean'],
        std_dev=params['std_dev'],
        uniform_low=params['uniform_low'],
        uniform_high=params['uniform_high'],
        seed_keys=[s.seed_key for s in streams],
        threads=threads,
        timestamp=datetime.now().isoformat(),
    )

    return SamplingResult(
        config=config,
        streams=streams,
        wall_clock_seconds=elapsed,
    )


def run_demo(seed_key=None):
    """Print the demonstration sequences: default generator, then key 5."""
    print("--- Test 1: Default (Time-based seed) ---")
    rng_default = Generator(seed_key)
    print(f"Uniform [0.0, 1.0]: {rng_default.random_uniform():.5f}")
    print(f"Normal  (m=0, s=1): {rng_default.random_normal():.5f}")
    print()

    print("--- Test 2: Specific Seed (Key = 5) ---")
    rng_fixed = Generator(5, 10.0, 2.0, 100.0, 200.0)

    print("Generating 3 Uniform Numbers [100, 200]:")
    for i in range(3):
        print(f"  Val {i + 1}: {rng_fixed.random_uniform():.5f}")

    print("Generating 4 Normal Numbers (Mean=10, SD=2):")
    for i in range(4):
        print(f"  Val {i + 1}: {rng_fixed.random_normal():.5f}")

    print("=" * 65)
    print("This is for random number generation using uniform distribution")
    print("=" * 65)
    for i in range(15):
        print("This is using uniform distribution default value")
        print(f"Iteration {i + 1}: {rng_default.random_uniform()!r}")

    print("=" * 65)
    print("This is for random number generation using normal distribution")
    print("=" * 65)
    for i in range(15):
        print("This is using normal distribution default value")
        print(f"Iteration {i + 1}: {rng_default.random_normal()!r}")

    return rng_default, rng_fixed


def main():
    parser = argparse.ArgumentParser(
        description='MRG Random - Консольное приложение для генерации случайных чисел',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры использования:
  python main.py --demo
  python main.py --seed-key 5 --distribution normal --mean 10 --std-dev 2 --count 1000
  python main.py --all-seeds --threads 4 --output-json results.json
        """
    )

    parser.add_argument('--seed-key', '-k', type=int, default=None,
                        help='Ключ начального состояния 1..24 (по умолчанию: по текущему времени)')
    parser.add_argument('--all-seeds', action='store_true',
                        help='Сгенерировать последовательности для всех 24 ключей')
    parser.add_argument('--distribution', '-d', type=str, choices=['uniform', 'normal'],
                        default='uniform', help='Распределение (по умолчанию: uniform)')
    parser.add_argument('--mean', type=float, default=0.0,
                        help='Математическое ожидание нормального распределения (по умолчанию: 0.0)')
    parser.add_argument('--std-dev', type=float, default=1.0,
                        help='СКО нормального распределения (по умолчанию: 1.0)')
    parser.add_argument('--low', type=float, default=0.0,
                        help='Нижняя граница равномерного распределения (по умолчанию: 0.0)')
    parser.add_argument('--high', type=float, default=1.0,
                        help='Верхняя граница равномерного распределения (по умолчанию: 1.0)')
    parser.add_argument('--count', '-n', type=int, default=1000,
                        help='Количество чисел в каждой последовательности (по умолчанию: 1000)')
    parser.add_argument('--threads', '-t', type=int, default=1,
                        help='Количество процессов для параллельной генерации (по умолчанию: 1)')
    parser.add_argument('--demo', action='store_true',
                        help='Вывести демонстрационные последовательности и выйти')

    # Export flags
    parser.add_argument('--output-json', type=str, default=None,
                        help='Экспорт результатов в JSON файл')
    parser.add_argument('--output-csv', type=str, default=None,
                        help='Экспорт результатов в CSV файл')

    # Visualization flags
    parser.add_argument('--plot', action='store_true',
                        help='Показать графики после генерации')
    parser.add_argument('--plot-save', type=str, default=None,
                        help='Сохранить графики в указанную директорию')

    args = parser.parse_args()

    if args.demo:
        try:
            run_demo(args.seed_key)
        except ValueError as e:
            print(f"Ошибка: {e}")
            sys.exit(1)
        return

    if args.all_seeds:
        seed_keys = sorted(SEED_TABLE)
    else:
        seed_keys = [args.seed_key]

    print("=" * 60)
    print("MRG Random - Консольное приложение")
    print("=" * 60)
    print(f"Распределение: {args.distribution}")
    print(f"Количество чисел: {args.count}")
    print(f"Ключи: {'все' if args.all_seeds else (args.seed_key or 'по времени')}")
    print(f"Количество процессов: {args.threads}")
    print("=" * 60)
    print()

    start_time = time.time()
    start_datetime = datetime.now()
    print(f"Время начала работы: {start_datetime.strftime('%d.%m.%Y %H:%M:%S')}")
    print("-" * 60)
    print()

    try:
        settings = Settings()
        settings.set_seed_key(args.seed_key)
        settings.set_mean(args.mean)
        settings.set_std_dev(args.std_dev)
        settings.set_uniform_bounds(args.low, args.high)
        settings.set_samples_cnt(args.count)

        if args.distribution == 'normal':
            settings.set_distribution(Distribution.NORMAL)
        else:
            settings.set_distribution(Distribution.UNIFORM)

        settings.print()
        print()

        # Ошибку ключа сообщаем до запуска рабочих процессов
        if args.seed_key is not None:
            settings.create_generator()

        sim_result = run_sampling(settings, seed_keys, threads=args.threads)

        elapsed_time = time.time() - start_time
        print(f"Время работы: {elapsed_time:.2f} сек")
        print("=" * 60)

        # Export results
        if args.output_json:
            sim_result.to_json(args.output_json)
            print(f"\nРезультаты экспортированы в JSON: {args.output_json}")

        if args.output_csv:
            sim_result.to_csv(args.output_csv)
            print(f"Результаты экспортированы в CSV: {args.output_csv}")

        # Visualization
        if args.plot or args.plot_save:
            from visualization import SamplePlotter
            plotter = SamplePlotter(sim_result)
            plotter.plot_combined_dashboard(save_dir=args.plot_save)
            if args.plot:
                import matplotlib.pyplot as plt
                plt.show()

    except Exception as e:
        end_datetime = datetime.now()
        elapsed_time = time.time() - start_time

        print()
        print("=" * 60)
        print("Ошибка при выполнении:")
        print("=" * 60)
        print(f"Ошибка: {e}")
        print()
        print(f"Время начала работы: {start_datetime.strftime('%d.%m.%Y %H:%M:%S')}")
        print(f"Время окончания работы: {end_datetime.strftime('%d.%m.%Y %H:%M:%S')}")
        print(f"Время работы до ошибки: {elapsed_time:.2f} секунд")
        print("=" * 60)

        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
