from typing import List, Optional
from avl_balance.core.errors import BalancePreconditionError
from avl_balance.core.models.node import AVLNode


class Balancer:
    """
    Responsável pelo balanceamento local de nós de uma árvore AVL.
    Quando um nó se desequilibra (diferença de alturas > 1), uma rotação
    simples ou dupla é aplicada, assegurando que a árvore continue balanceada.

    Não guarda estado: cada chamada apenas religa ponteiros de filhos e
    reescreve alturas em cache. Nunca cria nem destrói nós.
    """
    MAX_ALLOWED_FACTOR = 1
    MAX_REPAIRABLE_FACTOR = 2

    def get_height(self, node: Optional[AVLNode]) -> int:
        """Altura em cache do nó (0 para nó ausente). Complexidade: O(1)."""
        if node is None:
            return 0
        return node.height

    def _get_balance(self, node: Optional[AVLNode]) -> int:
        if node is None:
            return 0
        return self.get_height(node.left) - self.get_height(node.right)

    def update_height(self, node: AVLNode) -> int:
        """Recalcula a altura do nó a partir das alturas dos filhos."""
        node.height = 1 + max(self.get_height(node.left), self.get_height(node.right))
        return node.height

    def balance(self, node: AVLNode, logs: Optional[List[str]] = None) -> AVLNode:
        """
        Verifica e corrige o balanceamento do nó informado.

        Os filhos de `node` já devem ser AVL válidos; o próprio nó pode ter
        fator entre -2 e 2 após uma única inserção/remoção abaixo dele.
        Retorna a nova raiz da subárvore (o próprio nó, se nada mudou).
        Se `logs` for informado, registra nele cada rotação aplicada.
        """
        if node is None:
            raise BalancePreconditionError("Não é possível balancear um nó ausente.")

        balance = self._get_balance(node)
        if abs(balance) > self.MAX_REPAIRABLE_FACTOR:
            raise BalancePreconditionError(
                f"Nó {node.key!r} com fator {balance}: desequilíbrio de múltiplos níveis "
                f"não pode ser corrigido por uma única chamada."
            )

        left_balance = self._get_balance(node.left)
        right_balance = self._get_balance(node.right)

        # Caso 1 - Rotação à Direita (Left-Left)
        if balance > self.MAX_ALLOWED_FACTOR and left_balance >= 0:
            self._log(logs, f"Rotação simples à direita (LL) no nó {node.key!r}")
            return self._rotate_right(node)

        # Caso 2 - Rotação à Esquerda (Right-Right)
        if balance < -self.MAX_ALLOWED_FACTOR and right_balance <= 0:
            self._log(logs, f"Rotação simples à esquerda (RR) no nó {node.key!r}")
            return self._rotate_left(node)

        # Caso 3 - Rotação Dupla à Direita (Left-Right)
        if balance > self.MAX_ALLOWED_FACTOR and left_balance < 0:
            self._log(logs, f"Rotação dupla esquerda-direita (LR) no nó {node.key!r}")
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        # Caso 4 - Rotação Dupla à Esquerda (Right-Left)
        if balance < -self.MAX_ALLOWED_FACTOR and right_balance > 0:
            self._log(logs, f"Rotação dupla direita-esquerda (RL) no nó {node.key!r}")
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    # --- Rotações ---

    def _rotate_left(self, z: AVLNode) -> AVLNode:
        """
        Sobe o filho direito de `z` e devolve-o como nova raiz da subárvore.
        Exige `z.right` presente; caso contrário lança BalancePreconditionError
        sem alterar nenhum ponteiro.
        """
        y = z.right
        if y is None:
            raise BalancePreconditionError(
                f"Rotação à esquerda exige filho direito no nó {z.key!r}."
            )
        T2 = y.left

        y.left = z
        z.right = T2

        # z primeiro: a altura de y depende da nova altura de z
        self.update_height(z)
        self.update_height(y)

        return y

    def _rotate_right(self, z: AVLNode) -> AVLNode:
        """Espelho de `_rotate_left`: sobe `z.left`, que precisa existir."""
        y = z.left
        if y is None:
            raise BalancePreconditionError(
                f"Rotação à direita exige filho esquerdo no nó {z.key!r}."
            )
        T3 = y.right

        y.right = z
        z.left = T3

        self.update_height(z)
        self.update_height(y)

        return y

    @staticmethod
    def _log(logs: Optional[List[str]], message: str):
        if logs is not None:
            logs.append(message)
