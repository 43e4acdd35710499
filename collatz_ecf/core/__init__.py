"""
Pure building blocks shared by every engine:

- bijection: int <-> binary digits <-> tree path, powers of two, 3x + 1
- prefix: ECF prefix algebra (find, iterate, add, to_num, from_num)
"""
