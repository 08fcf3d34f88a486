"""
MIDI Engine Package

classifier.py   - Stateless status/data byte predicates
constants.py    - Message and controller-number tables
param_table.py  - Parameter byte counts per message
decoder.py      - The byte-at-a-time MidiDecoder state machine
sysex.py        - Caller-side SYSEX payload capture
stream.py       - Buffer-feeding driver that yields MidiMessage models
"""
