# -*- coding: utf-8 -*-
# ARQUIVO: data_parser.py

import logging
from typing import Dict, List, Sequence

from .model import Aisle, Instance, Order

logger = logging.getLogger(__name__)


class InstanceParser:
    """
    Responsável por ler um arquivo de instância e carregar seus dados
    em um objeto `Instance`.

    Formato esperado:
        n_pedidos n_itens n_corredores
        k item qtd item qtd ...      (uma linha por pedido)
        l item qtd item qtd ...      (uma linha por corredor)
        LB UB
    """

    @staticmethod
    def parse(file_path: str) -> Instance:
        """
        Lê um arquivo de instância e retorna um objeto Instance populado.

        Raises:
            FileNotFoundError: Se o caminho do arquivo não for encontrado.
            ValueError: Se o arquivo tiver um formato inesperado.
        """
        logger.info("Iniciando o parsing do arquivo: %s", file_path)
        with open(file_path, 'r') as f:
            lines = f.readlines()
        return InstanceParser.parse_lines(lines)

    @staticmethod
    def parse_lines(lines: Sequence[str]) -> Instance:
        lines = [line for line in lines if line.strip()]
        instance = Instance()

        # 1. Cabeçalho
        try:
            header = list(map(int, lines[0].split()))
            instance.num_orders, instance.num_items, instance.num_aisles = header
        except (ValueError, IndexError) as e:
            raise ValueError(f"Erro ao ler o cabeçalho do arquivo. Detalhes: {e}")
        logger.info("Cabeçalho lido: %d pedidos, %d itens, %d corredores.",
                    instance.num_orders, instance.num_items, instance.num_aisles)

        current_line_index = 1

        # 2. Pedidos
        for order_id in range(instance.num_orders):
            items = InstanceParser._parse_pairs(lines, current_line_index, f"pedido {order_id}")
            instance.orders.append(Order(id=order_id, items=items))
            current_line_index += 1
        logger.info("%d pedidos lidos.", len(instance.orders))

        # 3. Corredores
        for aisle_id in range(instance.num_aisles):
            inventory = InstanceParser._parse_pairs(lines, current_line_index, f"corredor {aisle_id}")
            instance.aisles.append(Aisle(id=aisle_id, inventory=inventory))
            current_line_index += 1
        logger.info("%d corredores lidos.", len(instance.aisles))

        # 4. Limites da Wave
        if current_line_index >= len(lines):
            raise ValueError("A linha de limites da wave (LB, UB) não foi encontrada no final do arquivo.")
        try:
            instance.min_wave_size, instance.max_wave_size = map(int, lines[current_line_index].split())
        except ValueError as e:
            raise ValueError(f"Linha de limites inválida na linha {current_line_index + 1}. Detalhes: {e}")
        logger.info("Limites da wave lidos: LB=%d, UB=%d.", instance.min_wave_size, instance.max_wave_size)

        # 5. Pós-processamento
        instance.build_item_locations()
        instance.build_orders_by_item()
        instance.validate()
        logger.info("Parsing concluído.")
        return instance

    @staticmethod
    def _parse_pairs(lines: List[str], line_index: int, owner: str) -> Dict[int, int]:
        if line_index >= len(lines):
            raise ValueError(f"Arquivo terminou inesperadamente ao ler o {owner}.")
        try:
            parts = list(map(int, lines[line_index].split()))
        except ValueError as e:
            raise ValueError(f"Valor não inteiro no {owner} (linha {line_index + 1}). Detalhes: {e}")

        k = parts[0]
        data = parts[1:]
        if len(data) != 2 * k:
            raise ValueError(f"Formato incorreto para o {owner} na linha {line_index + 1}.")
        return {data[2 * i]: data[2 * i + 1] for i in range(k)}
