"""Filtered lists, main-view tab state and side list panels."""