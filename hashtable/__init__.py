from hashtable.hash_map import HashMap
from hashtable.hash_set import PRESENT, HashSet
from hashtable.node import MISSING, Node

__all__ = ["HashMap", "HashSet", "MISSING", "Node", "PRESENT"]
