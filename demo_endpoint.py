"""
Quick demo script to run the /api/gemini-recommendation endpoint locally.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting State Compare Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:    GET  http://localhost:8000/health")
    print("   - Recommendation:  POST http://localhost:8000/api/gemini-recommendation")
    print("   - API Docs:             http://localhost:8000/docs")
    print()
    print("🔐 Configuration:")
    print("   GEMINI_API_KEY must be set (environment or .env file)")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/api/gemini-recommendation" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"stateA": {"nome": "Texas", "custo": 90}, "stateB": {"nome": "Vermont", "custo": 120}}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "state_compare.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
