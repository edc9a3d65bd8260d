from typing import Any, List, Optional, Tuple
from avl_balance.core.algorithms.balancing import Balancer
from avl_balance.core.models.node import AVLNode


class AVLTree:
    """
    Container mínimo que conduz o Balancer de baixo para cima.
    Após cada inserção/remoção, recalcula a altura e rebalanceia cada nó
    do caminho até a raiz, religando a nova raiz de cada subárvore no pai.
    """
    def __init__(self, balancer: Optional[Balancer] = None):
        self.root: Optional[AVLNode] = None
        self.balancer = balancer or Balancer()

    @property
    def height(self) -> int:
        return self.balancer.get_height(self.root)

    def insert(self, key, value: Any = None) -> List[str]:
        """
        Insere um novo nó e rebalanceia a árvore automaticamente.
        Retorna as rotações aplicadas nesta inserção.
        """
        logs: List[str] = []
        self.root = self._insert_recursive(self.root, key, value, logs)
        return logs

    def remove(self, key) -> Tuple[bool, List[str]]:
        """
        Remove o nó com a chave informada.
        Retorna (removido, rotações aplicadas nesta remoção).
        """
        logs: List[str] = []
        if self._find_node(key) is None:
            return False, logs
        self.root = self._remove_recursive(self.root, key, logs)
        return True, logs

    def search(self, key):
        """Busca um nó pela chave em O(log n). Retorna o valor ou None."""
        node = self._find_node(key)
        return node.value if node else None

    def _find_node(self, key) -> Optional[AVLNode]:
        current = self.root
        while current:
            if key == current.key:
                return current
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def _insert_recursive(self, node: Optional[AVLNode], key, value, logs: List[str]) -> AVLNode:
        if not node:
            return AVLNode(key, value)

        if key < node.key:
            node.left = self._insert_recursive(node.left, key, value, logs)
        elif key > node.key:
            node.right = self._insert_recursive(node.right, key, value, logs)
        else:
            # Chaves duplicadas não são permitidas, atualizamos o valor
            node.value = value
            return node

        return self._rebalance(node, logs)

    def _remove_recursive(self, node: Optional[AVLNode], key, logs: List[str]) -> Optional[AVLNode]:
        if not node:
            return None

        if key < node.key:
            node.left = self._remove_recursive(node.left, key, logs)
        elif key > node.key:
            node.right = self._remove_recursive(node.right, key, logs)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left

            # Dois filhos: o sucessor in-order assume a posição
            successor = node.right
            while successor.left:
                successor = successor.left
            node.key, node.value = successor.key, successor.value
            node.right = self._remove_recursive(node.right, successor.key, logs)

        return self._rebalance(node, logs)

    def _rebalance(self, node: AVLNode, logs: List[str]) -> AVLNode:
        self.balancer.update_height(node)
        return self.balancer.balance(node, logs)

    def get_all_keys(self) -> List[Any]:
        """Retorna todas as chaves em ordem (in-order traversal)."""
        keys: List[Any] = []
        self._in_order(self.root, keys)
        return keys

    def _in_order(self, node: Optional[AVLNode], keys: List[Any]):
        if node:
            self._in_order(node.left, keys)
            keys.append(node.key)
            self._in_order(node.right, keys)
