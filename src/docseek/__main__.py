from docseek.cli import main

raise SystemExit(main())
