"""
Infrastructure Layer - Clean Architecture
Contém implementações concretas de providers, mappers e repositórios
"""
