"""CRM console core: lead status model, inbox lifecycle and triage filters."""
