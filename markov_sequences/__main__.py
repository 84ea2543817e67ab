from markov_sequences.cli import main

raise SystemExit(main())
