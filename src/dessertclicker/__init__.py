"""Dessert Clicker: click the dessert, sell the dessert, unlock a better dessert."""
