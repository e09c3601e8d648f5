"""Worked drill solutions grouped by topic: basics, errors, hash maps, iterators, quizzes and models."""