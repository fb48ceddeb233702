"""
Couche domaine (core).

Contient les ports (interfaces abstraites), les objets valeur et les exceptions
métier. Cette couche n'a AUCUNE dépendance vers le web ou la BDD.

Sous-packages :
- ports/ : Interfaces abstraites définissant les contrats des repositories
- value_objects/ : Objets valeur immutables (FieldRef, SortDirection, Notice)
"""
