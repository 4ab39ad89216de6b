# -*- coding: utf-8 -*-
# ARQUIVO: model.py

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Sequence


class InvalidInstanceError(ValueError):
    """
    Dados de entrada inconsistentes (quantidades inválidas, itens fora do
    intervalo, limites da wave invertidos).
    """


@dataclass(frozen=True)
class Order:
    """
    Representa um único pedido. Contém a estrutura de dados pura.
    Os itens ficam numa visão somente leitura.
    """
    id: int
    items: Mapping[int, int] = field(hash=False)
    total_units: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'items', MappingProxyType(dict(self.items)))
        object.__setattr__(self, 'total_units', sum(self.items.values()))


@dataclass(frozen=True)
class Aisle:
    """
    Representa um corredor no armazém.
    """
    id: int
    inventory: Mapping[int, int] = field(hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'inventory', MappingProxyType(dict(self.inventory)))


@dataclass(frozen=True)
class Selection:
    """
    Uma wave candidata: índices dos pedidos escolhidos e dos corredores visitados.
    """
    orders: FrozenSet[int] = frozenset()
    aisles: FrozenSet[int] = frozenset()

    @classmethod
    def of(cls, orders: Iterable[int], aisles: Iterable[int]) -> 'Selection':
        return cls(frozenset(orders), frozenset(aisles))

    def is_empty(self) -> bool:
        return not self.orders or not self.aisles


@dataclass
class Instance:
    """
    Armazena todos os dados de uma instância do problema de forma estruturada.
    Esta classe é o contêiner central de dados do nosso modelo.
    """
    num_orders: int = 0
    num_items: int = 0
    num_aisles: int = 0
    orders: List[Order] = field(default_factory=list)
    aisles: List[Aisle] = field(default_factory=list)
    item_locations: Dict[int, List[int]] = field(default_factory=dict)
    orders_by_item: Dict[int, List[int]] = field(default_factory=dict)
    min_wave_size: int = 0
    max_wave_size: int = 0

    @classmethod
    def from_mappings(cls, orders: Sequence[Mapping[int, int]], aisles: Sequence[Mapping[int, int]],
                      num_items: int, min_wave_size: int, max_wave_size: int) -> 'Instance':
        """
        Monta uma instância a partir de listas de dicionários item -> quantidade.
        A posição de cada dicionário na lista é o seu índice.
        """
        instance = cls(
            num_orders=len(orders),
            num_items=num_items,
            num_aisles=len(aisles),
            orders=[Order(id=i, items=dict(items)) for i, items in enumerate(orders)],
            aisles=[Aisle(id=i, inventory=dict(inventory)) for i, inventory in enumerate(aisles)],
            min_wave_size=min_wave_size,
            max_wave_size=max_wave_size,
        )
        instance.build_item_locations()
        instance.build_orders_by_item()
        return instance

    def copy(self) -> 'Instance':
        """
        Cópia com listas e índices reversos próprios; pedidos e corredores
        (imutáveis) são compartilhados.
        """
        instance = replace(self, orders=list(self.orders), aisles=list(self.aisles),
                           item_locations={}, orders_by_item={})
        instance.build_item_locations()
        instance.build_orders_by_item()
        return instance

    def build_item_locations(self):
        """
        Constrói o mapeamento reverso de itens para corredores após o parsing.
        """
        self.item_locations.clear()
        for aisle in self.aisles:
            for item_id in aisle.inventory.keys():
                if item_id not in self.item_locations:
                    self.item_locations[item_id] = []
                self.item_locations[item_id].append(aisle.id)

    def build_orders_by_item(self):
        """
        Constrói o mapeamento reverso de itens para pedidos que os contêm.
        """
        self.orders_by_item.clear()
        for order in self.orders:
            for item_id in order.items:
                if item_id not in self.orders_by_item:
                    self.orders_by_item[item_id] = []
                self.orders_by_item[item_id].append(order.id)

    def validate(self):
        """
        Verifica as hipóteses que o resto do código assume sobre os dados.

        Raises:
            InvalidInstanceError: na primeira inconsistência encontrada.
        """
        if self.min_wave_size < 0 or self.min_wave_size > self.max_wave_size:
            raise InvalidInstanceError(
                f"Limites da wave inválidos: LB={self.min_wave_size}, UB={self.max_wave_size}.")

        for order in self.orders:
            for item_id, quantity in order.items.items():
                self._check_item(item_id, f"pedido {order.id}")
                if quantity <= 0:
                    raise InvalidInstanceError(
                        f"Pedido {order.id}: quantidade {quantity} do item {item_id} deve ser positiva.")

        for aisle in self.aisles:
            for item_id, quantity in aisle.inventory.items():
                self._check_item(item_id, f"corredor {aisle.id}")
                if quantity < 0:
                    raise InvalidInstanceError(
                        f"Corredor {aisle.id}: quantidade {quantity} do item {item_id} é negativa.")

    def _check_item(self, item_id: int, owner: str):
        if not 0 <= item_id < self.num_items:
            raise InvalidInstanceError(
                f"Item {item_id} do {owner} fora do intervalo [0, {self.num_items}).")
