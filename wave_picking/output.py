# -*- coding: utf-8 -*-
# ARQUIVO: output.py

import logging

from .model import Selection

logger = logging.getLogger(__name__)


def write_solution_file(selection: Selection, output_path: str):
    """
    Escreve a wave no formato do desafio: quantidade de pedidos, um índice de
    pedido por linha, quantidade de corredores, um índice de corredor por linha.
    """
    logger.info("Salvando a solução em '%s'...", output_path)
    with open(output_path, 'w') as f:
        f.write(f"{len(selection.orders)}\n")
        for order_id in sorted(selection.orders):
            f.write(f"{order_id}\n")
        f.write(f"{len(selection.aisles)}\n")
        for aisle_id in sorted(selection.aisles):
            f.write(f"{aisle_id}\n")
    logger.info("Arquivo de solução salvo com sucesso.")


def read_solution_file(solution_path: str) -> Selection:
    """
    Lê uma wave gravada por `write_solution_file` (ou por outro solver).

    Raises:
        ValueError: Se o arquivo estiver truncado ou tiver valores não inteiros.
    """
    with open(solution_path, 'r') as f:
        values = [line.strip() for line in f if line.strip()]

    try:
        numbers = list(map(int, values))
        num_orders = numbers[0]
        orders = numbers[1:1 + num_orders]
        num_aisles = numbers[1 + num_orders]
        aisles = numbers[2 + num_orders:2 + num_orders + num_aisles]
    except (ValueError, IndexError) as e:
        raise ValueError(f"Arquivo de solução inválido '{solution_path}'. Detalhes: {e}")

    if len(orders) != num_orders or len(aisles) != num_aisles:
        raise ValueError(f"Arquivo de solução truncado: '{solution_path}'.")
    return Selection.of(orders, aisles)
