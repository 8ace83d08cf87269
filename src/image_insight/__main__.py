from image_insight.cli import main

raise SystemExit(main())
