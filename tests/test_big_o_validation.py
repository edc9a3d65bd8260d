"""
Testes de validação de complexidade.
Valida empiricamente as garantias do balanceamento AVL:
- Altura da árvore: O(log n), limitada por ~1.44 * log2(n + 2)
- Rotações por inserção: O(1) amortizado
"""
import sys
import os
import math
import random
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src')))

from avl_balance.core.structures.avl_tree import AVLTree

SIZES = [100, 500, 1000, 2000, 5000]


def _build(size, shuffle):
    keys = list(range(size))
    if shuffle:
        random.Random(size).shuffle(keys)
    avl = AVLTree()
    corrections = np.array([len(avl.insert(key)) for key in keys])
    return avl, corrections


def test_avl_height_is_logarithmic():
    """Altura nunca excede o limite teórico AVL, mesmo com inserção ordenada."""
    print("--- Teste: Altura AVL vs log2(n) ---")

    for shuffle in (False, True):
        heights = np.array([_build(size, shuffle)[0].height for size in SIZES])
        bounds = np.array([1.44 * math.log2(size + 2) for size in SIZES])

        for size, height, bound in zip(SIZES, heights, bounds):
            print(f"  n={size:5d} (aleatório={shuffle}): altura={height} | limite={bound:.2f}")

        assert np.all(heights <= bounds)

        # A altura deve crescer linearmente em log2(n), com inclinação próxima de 1
        slope, _ = np.polyfit(np.log2(SIZES), heights, 1)
        print(f"  Inclinação altura/log2(n): {slope:.3f}")
        assert 0.5 < slope < 1.6

    print("  >> SUCESSO: Altura AVL é O(log n)")


def test_rotations_per_insert_are_bounded():
    """Cada inserção dispara no máximo uma correção (simples ou dupla)."""
    print("\n--- Teste: Rotações por inserção ---")
    ratios = []
    for size in SIZES:
        _, corrections = _build(size, shuffle=True)
        print(f"  n={size:5d}: {corrections.sum()} correções | máx. por inserção={corrections.max()}")

        # Cada inserção individual, não apenas a média
        assert np.all(corrections <= 1)
        ratios.append(corrections.mean())

    _, ordered = _build(SIZES[-1], shuffle=False)
    assert np.all(ordered <= 1)
    print(f"  Média de correções por inserção: {np.mean(ratios):.3f}")


if __name__ == "__main__":
    test_avl_height_is_logarithmic()
    test_rotations_per_insert_are_bounded()
