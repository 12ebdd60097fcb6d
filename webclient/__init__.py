"""Logika klienta MindVault: zapytania do API, cache danych, bramka logowania."""
