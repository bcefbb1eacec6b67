"""
Feature modules.

Each feature is self-contained:
- track: track model, GPX reading/writing
- anomalies: anomaly detection and overlay geometry
- smoothing: drag and click edit transforms
- stats: elevation statistics
- history: undo stack
- zoom: animated zoom/pan window
- editor: session composing the above for an interactive UI
"""
