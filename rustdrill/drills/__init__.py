"""Worked reference drills: basics, containers, errors, records, pointers and concurrency."""