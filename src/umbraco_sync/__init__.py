"""CRM -> Umbraco event synchronisation.

Filters CRM events to a venue, reconciles them against the events already in
Umbraco, and maps each one to a localized, block-structured content payload.
"""
