from glottis.cli import main

raise SystemExit(main())
